import json

import requests

from positions_client import PositionsClient, main


class _FakeResponse:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.content = json.dumps(payload).encode() if payload is not None else b""
        self.text = self.content.decode()

    def json(self):
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class _FakeSession:
    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_create_posts_payload():
    session = _FakeSession(_FakeResponse(201, {"position_id": 1, "position_code": "A", "position_name": "B", "id": "1"}))
    client = PositionsClient(base_url="http://svc/", session=session)

    data, error = client.create_position("A", "B")

    assert error is None
    assert data["id"] == "1"
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://svc/positions"
    assert call["json"] == {"position_code": "A", "position_name": "B"}


def test_update_sends_only_given_fields():
    session = _FakeSession(_FakeResponse(200, {"message": "Position updated successfully"}))
    client = PositionsClient(base_url="http://svc", session=session)

    client.update_position(3, position_name="C")

    call = session.calls[0]
    assert call["method"] == "PUT"
    assert call["url"] == "http://svc/positions/3"
    assert call["json"] == {"position_name": "C"}
    assert "headers" not in call


def test_not_found_is_returned_as_error():
    session = _FakeSession(_FakeResponse(404, {"detail": "Position not found"}))
    client = PositionsClient(base_url="http://svc", session=session)

    data, error = client.get_position(9)

    assert data is None
    assert error == {"status_code": 404, "message": "Position not found"}


def test_non_object_error_body_is_returned_as_error():
    session = _FakeSession(_FakeResponse(500, ["boom"]))
    client = PositionsClient(base_url="http://svc", session=session)

    data, error = client.get_position(1)

    assert data is None
    assert error == {"status_code": 500, "message": "['boom']"}


def test_connection_error_is_returned_as_error():
    session = _FakeSession(requests.ConnectionError("refused"))
    client = PositionsClient(base_url="http://svc", session=session)

    data, error = client.list_positions()

    assert data == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_cli_prints_json(capsys):
    session = _FakeSession(_FakeResponse(200, [{"position_id": 1}]))
    client = PositionsClient(base_url="http://svc", session=session)

    code = main(["list"], client=client)

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"position_id": 1}]


def test_cli_reports_error(capsys):
    session = _FakeSession(_FakeResponse(404, {"detail": "Position not found"}))
    client = PositionsClient(base_url="http://svc", session=session)

    code = main(["delete", "5"], client=client)

    assert code == 1
    assert "Position not found" in capsys.readouterr().err
