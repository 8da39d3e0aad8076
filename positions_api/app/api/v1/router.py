"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, positions

router = APIRouter()

router.include_router(positions.router, prefix="/positions", tags=["positions"])
router.include_router(health.router, prefix="/health", tags=["health"])
