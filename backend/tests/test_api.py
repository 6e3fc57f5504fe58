"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from wheel_solver.config import Settings
from wheel_solver.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def golden_plan():
    """Best plan for board 000."""
    return [
        "advance", "advance", "advance", "collect",
        "counter_clockwise", "collect", "counter_clockwise", "collect",
    ]


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert "endpoints" in data


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        """Test health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


class TestSolveEndpoint:
    """Tests for solve endpoint."""

    def test_solve_golden_board(self, client, golden_plan):
        """Test solving board 000."""
        response = client.post("/api/solve", json={"board": "000"})

        assert response.status_code == 200
        data = response.json()
        assert data["reward"] == 77
        assert data["start_location"] == 0
        assert data["region_count"] == 3
        assert data["action_count"] == 8
        assert data["actions"] == golden_plan
        assert data["states_visited"] > 0
        assert data["instructions"] == [
            "Tap on 0 to start",
            "tap the active region 3 times",
            "swipe on active region",
            "swipe on 2",
            "swipe on 1",
        ]

    def test_solve_gestures(self, client):
        """Test that structured gestures accompany the instructions."""
        response = client.post("/api/solve", json={"board": "000"})

        gestures = response.json()["gestures"]
        assert [g["type"] for g in gestures] == [
            "tap_active", "swipe_active", "swipe_region", "swipe_region",
        ]
        assert gestures[0]["count"] == 3
        assert gestures[2]["position"] == 2
        assert gestures[3]["instruction"] == "swipe on 1"

    def test_solve_strips_line_terminator(self, client):
        """Test that a trailing newline is not a region."""
        response = client.post("/api/solve", json={"board": "6-\n"})

        assert response.status_code == 200
        data = response.json()
        assert data["region_count"] == 2
        assert data["reward"] == 36

    def test_solve_cleared_board(self, client):
        """Test solving a board with no live tiles."""
        response = client.post("/api/solve", json={"board": "--"})

        assert response.status_code == 200
        data = response.json()
        assert data["start_location"] is None
        assert data["instructions"] == []
        assert data["reward"] == 0

    def test_solve_with_threshold(self, client):
        """Test overriding the death threshold."""
        response = client.post("/api/solve", json={"board": "0", "threshold": 2})

        assert response.status_code == 200
        assert response.json()["reward"] == 4

    def test_solve_empty_board(self, client):
        """Test that an empty board is rejected."""
        response = client.post("/api/solve", json={"board": ""})

        assert response.status_code == 400

    def test_solve_board_too_large(self, client):
        """Test that boards over the region limit are rejected."""
        response = client.post("/api/solve", json={"board": "0123456789"})

        assert response.status_code == 400
        assert "regions" in response.json()["detail"]

    def test_solve_eight_regions_rejected(self, client):
        """Test that the default limit stops at seven regions."""
        response = client.post("/api/solve", json={"board": "01234567"})

        assert response.status_code == 400
        assert "at most 7" in response.json()["detail"]

    def test_solve_missing_board(self, client):
        """Test solving with missing board."""
        response = client.post("/api/solve", json={})

        assert response.status_code == 422  # Validation error


class TestEncodeEndpoint:
    """Tests for encode endpoint."""

    def test_encode_actions(self, client, golden_plan):
        """Test encoding an action history."""
        response = client.post(
            "/api/encode",
            json={"actions": golden_plan, "start_location": 0, "region_count": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["instructions"] == [
            "tap the active region 3 times",
            "swipe on active region",
            "swipe on 2",
            "swipe on 1",
        ]
        assert len(data["gestures"]) == 4

    def test_encode_unknown_action(self, client):
        """Test that unknown action names are rejected."""
        response = client.post(
            "/api/encode",
            json={"actions": ["advance", "spin"], "start_location": 0, "region_count": 3},
        )

        assert response.status_code == 400
        assert "spin" in response.json()["detail"]

    def test_encode_start_outside_board(self, client):
        """Test that the start location must be on the board."""
        response = client.post(
            "/api/encode",
            json={"actions": ["advance"], "start_location": 3, "region_count": 3},
        )

        assert response.status_code == 400


class TestBoardEndpoints:
    """Tests for replay and tick endpoints."""

    def test_replay_golden_plan(self, client, golden_plan):
        """Test replaying the best plan of board 000."""
        response = client.post(
            "/api/replay",
            json={"board": "000", "start_location": 0, "actions": golden_plan},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["reward"] == 77
        assert data["cleared"] is True
        assert data["cursor"] == 1
        assert data["final_board"] == "- - -"

    def test_replay_partial_plan(self, client):
        """Test replaying a plan that leaves live tiles."""
        response = client.post(
            "/api/replay",
            json={"board": "01", "start_location": 1, "actions": ["clockwise"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["cursor"] == 0
        assert data["final_board"] == "A2 A1"
        assert data["cleared"] is False

    def test_replay_bad_start(self, client):
        """Test that an off-board start location is rejected."""
        response = client.post(
            "/api/replay",
            json={"board": "00", "start_location": 5, "actions": []},
        )

        assert response.status_code == 400

    def test_tick_preview(self, client):
        """Test previewing ticks."""
        response = client.post("/api/tick", json={"board": "1-", "ticks": 3})

        assert response.status_code == 200
        assert response.json()["boards"] == ["0 -", "A1 -", "A2 -"]


class TestErrorSchema:
    """Tests for the documented error body."""

    def test_error_schema_matches_http_exception(self, client):
        """Test that the documented error body is FastAPI's detail field."""
        schema = client.get("/openapi.json").json()["components"]["schemas"]["ErrorResponse"]

        assert list(schema["properties"]) == ["detail"]
        assert schema["required"] == ["detail"]

    def test_error_body_has_detail_only(self, client):
        """Test that a rejected request returns the documented shape."""
        response = client.post("/api/solve", json={"board": ""})

        assert response.status_code == 400
        assert set(response.json()) == {"detail"}


class TestSettings:
    """Tests for service settings."""

    def test_defaults(self, monkeypatch):
        """Test puzzle defaults."""
        monkeypatch.delenv("WHEEL_MAX_REGIONS", raising=False)
        settings = Settings()

        assert settings.threshold == 6
        assert settings.gesture_run_cap == 3
        assert settings.max_regions == 7

    def test_cors_origins_from_env(self, monkeypatch):
        """Test that CORS origins are read as a JSON array."""
        monkeypatch.setenv("WHEEL_CORS_ORIGINS", '["http://example.com", "http://localhost:8080"]')

        assert Settings().cors_origins == ["http://example.com", "http://localhost:8080"]
