"""
Pydantic schemas for positions.

A position is a job title or role identified by an integer
``position_id``.  The string ``id`` mirrors ``position_id`` for
clients that prefer string identifiers.  Two response shapes exist:
``PositionRead`` carries the timestamps, ``PositionCreated`` (returned
only by create) does not.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PositionCreate(BaseModel):
    """Schema for creating a new position.

    Identifiers and timestamps are assigned by the server; any such
    keys in the request body are ignored.
    """

    position_code: str = Field(..., description="Short code of the position, e.g. ``ENG1``")
    position_name: str = Field(..., description="Human readable name of the position")


class PositionUpdate(BaseModel):
    """Schema for updating an existing position.

    All fields are optional; only provided values will be updated.
    ``position_id``, ``id`` and ``created_at`` are not updatable and
    are dropped if a client sends them.
    """

    position_code: Optional[str] = None
    position_name: Optional[str] = None

    def changes(self) -> dict:
        """Return the fields the client actually supplied.

        A field left out of the request and a field sent as ``null`` are
        both treated as "not supplied".  An empty string is a value.
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)


class PositionCreated(BaseModel):
    """Response returned by create (no timestamps)."""

    position_id: int
    position_code: str
    position_name: str
    id: str

    model_config = ConfigDict(from_attributes=True)


class PositionRead(PositionCreated):
    """Full public projection of a stored position."""

    created_at: str
    updated_at: str


class MessageResponse(BaseModel):
    """Envelope returned by update and delete."""

    message: str
