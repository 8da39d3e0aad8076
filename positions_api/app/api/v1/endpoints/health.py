"""Liveness endpoint reporting how many positions are held."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from positions_api.app.api.deps import get_position_store
from positions_api.app.services.position_service import PositionStore

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(store: PositionStore = Depends(get_position_store)) -> Dict[str, Any]:
    return {"status": "ok", "positions": len(store)}
