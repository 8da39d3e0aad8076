"""
In‑memory store for position records.

``PositionStore`` owns every position held by the process.  Records
live in a plain list kept in insertion order and are located by a
linear scan on ``position_id``.  Callers never receive the stored
records themselves: each operation returns a freshly built pydantic
model, so mutating a response cannot change the store.

A missing record is reported by returning ``None``; the store never
raises for it and leaves HTTP semantics to the API layer.

The store performs no locking.  It is meant to be used from a single
event loop, where each call runs to completion before the next one
starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Mapping, Optional, Union

from positions_api.app.schemas.position import (
    PositionCreate,
    PositionCreated,
    PositionRead,
    PositionUpdate,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("position_code", "position_name")


def utc_now_iso() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class PositionRecord:
    """A stored position.  Only ``PositionStore`` creates or mutates these."""

    position_id: int
    position_code: str
    position_name: str
    created_at: str
    updated_at: str

    @property
    def id(self) -> str:
        # Derived so it can never drift from position_id.
        return str(self.position_id)


class PositionStore:
    """Process‑local collection of positions."""

    def __init__(self, clock: Optional[Callable[[], str]] = None) -> None:
        self._clock = clock or utc_now_iso
        self._positions: List[PositionRecord] = []

    def __len__(self) -> int:
        return len(self._positions)

    def list_all(self) -> List[PositionRead]:
        """Return every position in insertion order."""
        return [PositionRead.model_validate(pos) for pos in self._positions]

    def get_by_id(self, position_id: int) -> Optional[PositionRead]:
        """Return the position with ``position_id`` or ``None``."""
        pos = self._find(position_id)
        if pos is None:
            logger.debug("Position %s not found", position_id)
            return None
        return PositionRead.model_validate(pos)

    def create_position(self, position_code: str, position_name: str) -> PositionCreated:
        """Insert a new position and return it without timestamps.

        The new ``position_id`` is one more than the largest id currently
        stored, or 1 for an empty store.  Invalid field types raise
        ``pydantic.ValidationError`` and leave the store unchanged.
        """
        data = PositionCreate(position_code=position_code, position_name=position_name)
        new_id = max((pos.position_id for pos in self._positions), default=0) + 1
        now = self._clock()
        record = PositionRecord(
            position_id=new_id,
            position_code=data.position_code,
            position_name=data.position_name,
            created_at=now,
            updated_at=now,
        )
        created = PositionCreated.model_validate(record)
        self._positions.append(record)
        logger.info("Created position %s (%s)", new_id, data.position_code)
        return created

    def update_position(
        self,
        position_id: int,
        update: Union[PositionUpdate, Mapping[str, object]],
    ) -> Optional[PositionRead]:
        """Merge ``update`` onto an existing position.

        Only ``position_code`` and ``position_name`` are merged; any other
        key is ignored.  ``updated_at`` is refreshed even when no field
        changes.  Returns the updated position or ``None`` if it does not
        exist.
        """
        pos = self._find(position_id)
        if pos is None:
            logger.debug("Position %s not found for update", position_id)
            return None
        if not isinstance(update, PositionUpdate):
            update = PositionUpdate.model_validate(dict(update))
        changes = update.changes()
        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(pos, field, changes[field])
        # ISO strings of the same format order chronologically.
        pos.updated_at = max(self._clock(), pos.updated_at)
        logger.info("Updated position %s: %s", position_id, sorted(changes))
        return PositionRead.model_validate(pos)

    def remove_position(self, position_id: int) -> Optional[PositionRead]:
        """Delete a position and return its last state, or ``None``."""
        for index, pos in enumerate(self._positions):
            if pos.position_id == position_id:
                del self._positions[index]
                logger.info("Deleted position %s", position_id)
                return PositionRead.model_validate(pos)
        logger.debug("Position %s not found for delete", position_id)
        return None

    def reset(self) -> None:
        """Remove every position."""
        self._positions = []
        logger.info("Position store reset")

    def _find(self, position_id: int) -> Optional[PositionRecord]:
        for pos in self._positions:
            if pos.position_id == position_id:
                return pos
        return None
