"""
Shared FastAPI dependencies.

The application owns exactly one ``PositionStore``, created in
``create_app`` and kept on ``app.state``.  Handlers receive it through
``get_position_store`` rather than importing a module level global,
which lets tests override it with ``app.dependency_overrides``.
"""

from fastapi import Request

from positions_api.app.services.position_service import PositionStore


def get_position_store(request: Request) -> PositionStore:
    """Return the store bound to the running application."""
    return request.app.state.position_store
