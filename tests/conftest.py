import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from positions_api.app.main import create_app
from positions_api.app.services.position_service import PositionStore


class FakeClock:
    """Clock returning strictly increasing ISO timestamps, one second apart."""

    def __init__(self) -> None:
        self.ticks = 0

    def __call__(self) -> str:
        self.ticks += 1
        minutes, seconds = divmod(self.ticks, 60)
        return f"2024-01-01T00:{minutes:02d}:{seconds:02d}.000Z"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> PositionStore:
    return PositionStore(clock=clock)


@pytest.fixture
def client(store: PositionStore):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
