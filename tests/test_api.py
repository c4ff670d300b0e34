"""Tests for the HTTP and websocket surface."""

import time

import pytest
from fastapi.testclient import TestClient

from snapshots.main import app
from snapshots.schemas.content import ContentItem
from snapshots.services.snapshot_service import SnapshotService, get_snapshot_service
from tests.fixtures.fakes import FakeModelClient, snapshot_json


@pytest.fixture
def service() -> SnapshotService:
    client = FakeModelClient(snapshot=snapshot_json(ContentItem(title="Tea", summary="*Leaves*")))
    return SnapshotService(client=client, strategy="snapshot")


@pytest.fixture
def client(service: SnapshotService):
    app.dependency_overrides[get_snapshot_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def wait_for_terminal_state(client: TestClient, timeout: float = 2.0) -> dict:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        body = client.get("/snapshots/state").json()
        if body["status"] in ("success", "error"):
            return body
        time.sleep(0.01)
    raise AssertionError("generation did not finish in time")


class TestSnapshotEndpoints:
    """Test generating and reading state over HTTP."""

    def test_state_is_initial_before_any_request(self, client: TestClient) -> None:
        """Test that GET /state reports Initial for a fresh service."""
        response = client.get("/snapshots/state")

        assert response.status_code == 200
        assert response.json() == {"status": "initial"}

    def test_generate_accepts_and_reports_loading(self, client: TestClient) -> None:
        """Test that POST /generate answers 202 with the Loading state."""
        response = client.post("/snapshots/generate", json={"topic": "tea"})

        assert response.status_code == 202
        assert response.json() == {"status": "loading"}

    def test_generate_eventually_succeeds(self, client: TestClient) -> None:
        """Test that the generated cards become visible through GET /state."""
        client.post("/snapshots/generate", json={"topic": "tea"})

        body = wait_for_terminal_state(client)

        assert body == {
            "status": "success",
            "content_list": [{"title": "Tea", "summary": "*Leaves*"}],
        }

    def test_generate_requires_topic(self, client: TestClient) -> None:
        """Test that a body without a topic is rejected by validation."""
        response = client.post("/snapshots/generate", json={})

        assert response.status_code == 422

    def test_health(self, client: TestClient) -> None:
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSnapshotWebsocket:
    """Test the websocket state stream."""

    def test_sends_current_state_on_connect(self, client: TestClient) -> None:
        """Test that a new connection immediately receives the current state."""
        with client.websocket_connect("/ws/snapshots") as websocket:
            assert websocket.receive_json() == {"status": "initial"}

    def test_answers_ping(self, client: TestClient) -> None:
        """Test that a ping frame is answered with pong."""
        with client.websocket_connect("/ws/snapshots") as websocket:
            websocket.receive_json()
            websocket.send_text("ping")

            assert websocket.receive_text() == "pong"

    def test_forwards_later_publishes_in_order(self, client: TestClient) -> None:
        """Test that a generate request streams loading then success to the socket."""
        with client.websocket_connect("/ws/snapshots") as websocket:
            assert websocket.receive_json() == {"status": "initial"}

            response = client.post("/snapshots/generate", json={"topic": "tea"})
            assert response.status_code == 202

            assert websocket.receive_json() == {"status": "loading"}
            assert websocket.receive_json() == {
                "status": "success",
                "content_list": [{"title": "Tea", "summary": "*Leaves*"}],
            }
