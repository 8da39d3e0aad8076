import pytest

from positions_api.app.api.v1.endpoints.positions import coerce_position_id


def _create(client, code="ENG1", name="Engineer", prefix=""):
    response = client.post(f"{prefix}/positions", json={"position_code": code, "position_name": name})
    assert response.status_code == 201
    return response.json()


def test_list_is_empty_initially(client):
    response = client.get("/positions")

    assert response.status_code == 200
    assert response.json() == []


def test_create_response_has_no_timestamps(client):
    body = _create(client)

    assert body == {"position_id": 1, "position_code": "ENG1", "position_name": "Engineer", "id": "1"}


def test_create_ignores_server_assigned_fields(client):
    response = client.post(
        "/positions",
        json={"position_code": "A", "position_name": "B", "position_id": 50, "id": "50"},
    )

    assert response.json()["position_id"] == 1


def test_create_requires_both_fields(client):
    response = client.post("/positions", json={"position_code": "A"})

    assert response.status_code == 422


def test_get_returns_full_projection(client):
    created = _create(client)

    response = client.get(f"/positions/{created['position_id']}")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"position_id", "position_code", "position_name", "id", "created_at", "updated_at"}
    assert body["position_code"] == "ENG1"


def test_get_missing_returns_404(client):
    response = client.get("/positions/42")

    assert response.status_code == 404
    assert response.json() == {"detail": "Position not found"}


def test_get_non_numeric_id_returns_404(client):
    _create(client)

    assert client.get("/positions/abc").status_code == 404


def test_get_accepts_integral_numeric_text(client):
    _create(client)

    assert client.get("/positions/1.0").json()["position_id"] == 1


def test_update_returns_message_and_merges(client, store):
    created = _create(client, "A", "B")

    response = client.put(f"/positions/{created['position_id']}", json={"position_name": "C"})

    assert response.status_code == 200
    assert response.json() == {"message": "Position updated successfully"}
    stored = store.get_by_id(created["position_id"])
    assert (stored.position_code, stored.position_name) == ("A", "C")


def test_update_missing_returns_404(client):
    response = client.put("/positions/7", json={"position_name": "C"})

    assert response.status_code == 404


def test_delete_returns_message_and_removes(client):
    created = _create(client)

    response = client.delete(f"/positions/{created['position_id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Position deleted successfully"}
    assert client.get(f"/positions/{created['position_id']}").status_code == 404


def test_delete_missing_returns_404(client):
    assert client.delete("/positions/3").status_code == 404


def test_versioned_prefix_shares_store(client):
    created = _create(client, prefix="/api/v1")

    listed = client.get("/positions").json()

    assert [pos["position_id"] for pos in listed] == [created["position_id"]]
    assert client.get("/api/v1/positions/1").status_code == 200


def test_health_reports_count(client):
    _create(client)
    _create(client, "OPS1", "Operator")

    assert client.get("/health").json() == {"status": "ok", "positions": 2}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("7", 7),
        (" 7 ", 7),
        ("7.0", 7),
        ("7e0", 7),
        ("-3", -3),
        ("7.5", None),
        ("abc", None),
        ("nan", None),
        ("", None),
    ],
)
def test_coerce_position_id(raw, expected):
    assert coerce_position_id(raw) == expected
