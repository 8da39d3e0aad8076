"""
Position endpoints for API v1.

These routes expose CRUD operations on positions:

* ``GET    /positions``       – list all positions
* ``GET    /positions/{id}``  – retrieve one position
* ``POST   /positions``       – create a position
* ``PUT    /positions/{id}``  – update a position
* ``DELETE /positions/{id}``  – delete a position

Handlers only coerce the path id, log the call and translate a missing
record into HTTP 404.  All state lives in ``PositionStore``.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from positions_api.app.api.deps import get_position_store
from positions_api.app.schemas.position import (
    MessageResponse,
    PositionCreate,
    PositionCreated,
    PositionRead,
    PositionUpdate,
)
from positions_api.app.services.position_service import PositionStore

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Position not found"


def coerce_position_id(raw: str) -> Optional[int]:
    """Convert a path id to an integer.

    Integral numeric text such as ``"7"``, ``" 7 "``, ``"7.0"`` or
    ``"7e0"`` yields ``7``.  Anything else yields ``None``, which matches
    no position.
    """
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return None
    return int(value) if value.is_integer() else None


def _lookup_id(raw: str) -> int:
    position_id = coerce_position_id(raw)
    if position_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return position_id


@router.get("", response_model=List[PositionRead])
async def list_positions(store: PositionStore = Depends(get_position_store)) -> List[PositionRead]:
    """Return all positions in insertion order."""
    logger.info("GET /positions triggered")
    return store.list_all()


@router.get("/{position_id}", response_model=PositionRead)
async def get_position(
    position_id: str,
    store: PositionStore = Depends(get_position_store),
) -> PositionRead:
    """Retrieve a single position.  Returns HTTP 404 if it does not exist."""
    logger.info("GET /positions/%s triggered", position_id)
    position = store.get_by_id(_lookup_id(position_id))
    if position is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return position


@router.post("", response_model=PositionCreated, status_code=status.HTTP_201_CREATED)
async def create_position(
    position_in: PositionCreate,
    store: PositionStore = Depends(get_position_store),
) -> PositionCreated:
    """Create a position.  The response omits the timestamps."""
    logger.info("POST /positions triggered %s", position_in.model_dump())
    return store.create_position(position_in.position_code, position_in.position_name)


@router.put("/{position_id}", response_model=MessageResponse)
async def update_position(
    position_id: str,
    position_in: PositionUpdate,
    store: PositionStore = Depends(get_position_store),
) -> MessageResponse:
    """Update a position with the supplied fields."""
    logger.info("PUT /positions/%s triggered %s", position_id, position_in.changes())
    updated = store.update_position(_lookup_id(position_id), position_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MessageResponse(message="Position updated successfully")


@router.delete("/{position_id}", response_model=MessageResponse)
async def delete_position(
    position_id: str,
    store: PositionStore = Depends(get_position_store),
) -> MessageResponse:
    """Delete a position."""
    logger.info("DELETE /positions/%s triggered", position_id)
    removed = store.remove_position(_lookup_id(position_id))
    if removed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MessageResponse(message="Position deleted successfully")
