import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from api.dependencies import get_db
from api.main import app
from database.exceptions import IntegrityError, NotFoundError
from database.repositories.game_repo import GameRepositoryDB
from models import (
    AnimalType,
    Course,
    GameSnapshot,
    Hole,
    HoleScore,
    Player,
    Segment,
    TurboValues,
)


def _holes():
    return [Hole(number=i, par=3 if i in (3, 12) else 4, handicap=i) for i in range(1, 19)]


def _snapshot(**kwargs) -> GameSnapshot:
    defaults = dict(
        game_id="7",
        course=Course(id="3", name="Pebble Creek", holes=_holes()),
        players=[
            Player(id="11", name="Ann", role="host", handicap=4),
            Player(id="12", name="Bob", handicap=1),
        ],
        scores=[
            HoleScore(player_id="11", hole_number=1, strokes=4),
            HoleScore(player_id="12", hole_number=1, strokes=4),
        ],
    )
    defaults.update(kwargs)
    return GameSnapshot(**defaults)


@pytest.fixture
def mock_db():
    manager = MagicMock()
    manager.games.get_snapshot = AsyncMock(return_value=_snapshot())
    manager.games.upsert_score = AsyncMock()
    manager.games.save_turbo_values = AsyncMock()
    manager.games.save_scoring_config = AsyncMock()
    manager.games.save_handicap_overrides = AsyncMock()
    manager.games.save_animal_scores = AsyncMock()
    app.dependency_overrides[get_db] = lambda: manager
    yield manager
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    # No context manager: the lifespan (and its database pool) never starts
    return TestClient(app)


# ================================================================
# Stateless scoring endpoints
# ================================================================

def test_allocation_endpoint(client):
    payload = {
        "players": [{"id": "a", "handicap": 3}, {"id": "b", "handicap": 0}],
        "course": {"holes": [h.model_dump() for h in _holes()]},
    }
    resp = client.post("/api/scoring/allocation", json=payload)

    assert resp.status_code == 200
    pairs = resp.json()["pairs"]
    assert pairs["a"]["b"]["front9"] == {"1": 1, "2": 1, "4": 1}
    assert pairs["b"]["a"]["front9"] == {}


def test_allocation_rejects_bad_turbo(client):
    payload = {
        "players": [{"id": "a"}],
        "course": {"holes": []},
        "turbo": {"multipliers": {"3": 0}},
    }
    resp = client.post("/api/scoring/allocation", json=payload)
    assert resp.status_code == 422


def test_h2h_endpoint(client):
    snapshot = _snapshot(scores=[
        HoleScore(player_id="11", hole_number=1, strokes=4),
        HoleScore(player_id="12", hole_number=1, strokes=6),
    ])
    resp = client.post("/api/scoring/h2h", json={
        "snapshot": snapshot.model_dump(mode="json"),
        "player_id": "11",
    })

    assert resp.status_code == 200
    match = resp.json()["12"]
    assert match["holes"][0]["result"] == "WIN"
    assert match["summary"]["total_points"] == 1
    assert match["summary"]["pending_count"] == 17


def test_h2h_unknown_focus_player(client):
    resp = client.post("/api/scoring/h2h", json={
        "snapshot": _snapshot().model_dump(mode="json"),
        "player_id": "nobody",
    })
    assert resp.status_code == 404


def test_animals_endpoint(client):
    resp = client.post("/api/scoring/animals", json={
        "players": [{"id": "a", "name": "Ann"}],
        "turbo": {"multipliers": {"9": 2}},
        "animal_scores": [
            {"player_id": "a", "hole_number": 9, "animal_type": "giraffe", "count": 2},
        ],
    })

    assert resp.status_code == 200
    totals = resp.json()["a"]
    assert totals["grand_total"] == 4
    assert totals["animal_totals"]["giraffe"] == 4


def test_scoreboard_endpoint(client):
    resp = client.post("/api/scoring/scoreboard", json={
        "snapshot": _snapshot(turbo=TurboValues.from_preset("standard")).model_dump(mode="json"),
        "player_id": "12",
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["turbo_preset"] == "standard"
    assert body["scoring_config"]["holeInOne"] == 10
    # Bob receives 3 strokes from Ann on each nine
    assert body["stroke_indicators"]["11"]["1"]["color"] == "green"


# ================================================================
# Game endpoints
# ================================================================

def test_get_scoreboard(client, mock_db):
    resp = client.get("/api/games/7/scoreboard", params={"player_id": "11"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["game_id"] == "7"
    assert body["h2h"]["12"]["holes"][0]["result"] == "LOSE"
    mock_db.games.get_snapshot.assert_awaited_with("7")


def test_get_scoreboard_game_not_found(client, mock_db):
    mock_db.games.get_snapshot.return_value = None
    resp = client.get("/api/games/99/scoreboard", params={"player_id": "11"})
    assert resp.status_code == 404


def test_get_scoreboard_invalid_stored_data(client, mock_db):
    mock_db.games.get_snapshot.side_effect = IntegrityError("bad overrides")
    resp = client.get("/api/games/7/scoreboard", params={"player_id": "11"})
    assert resp.status_code == 409


def test_submit_score(client, mock_db):
    resp = client.post("/api/games/7/scores", json={"player_id": "12", "hole_number": 2, "strokes": 3})

    assert resp.status_code == 200
    mock_db.games.upsert_score.assert_awaited_once_with("7", "12", 2, 3)
    assert resp.json()["focus_player_id"] == "12"


def test_submit_score_unknown_player(client, mock_db):
    mock_db.games.upsert_score.side_effect = NotFoundError("Player 99 is not in game 7")
    resp = client.post("/api/games/7/scores", json={"player_id": "99", "hole_number": 2, "strokes": 3})
    assert resp.status_code == 404


def test_submit_score_out_of_range(client, mock_db):
    resp = client.post("/api/games/7/scores", json={"player_id": "12", "hole_number": 19, "strokes": 3})
    assert resp.status_code == 422
    mock_db.games.upsert_score.assert_not_awaited()


def test_update_turbo_preset(client, mock_db):
    resp = client.put("/api/games/7/turbo", params={"player_id": "11"}, json={"preset": "curve"})

    assert resp.status_code == 200
    _, turbo = mock_db.games.save_turbo_values.call_args[0]
    assert turbo.get(9) == 4
    assert turbo.detect_preset() == "curve"


def test_update_turbo_unknown_preset(client, mock_db):
    resp = client.put("/api/games/7/turbo", params={"player_id": "11"}, json={"preset": "loopy"})
    assert resp.status_code == 422
    mock_db.games.save_turbo_values.assert_not_awaited()


def test_update_turbo_requires_host(client, mock_db):
    resp = client.put("/api/games/7/turbo", params={"player_id": "12"}, json={"preset": "curve"})
    assert resp.status_code == 403


def test_update_scoring_config(client, mock_db):
    resp = client.put(
        "/api/games/7/scoring-config",
        params={"player_id": "11"},
        json={"holeInOne": 25, "eagle": 6, "birdie": 3, "parOrWorse": 1},
    )

    assert resp.status_code == 200
    _, config = mock_db.games.save_scoring_config.call_args[0]
    assert config.hole_in_one == 25
    assert config.albatross is None


def test_update_handicaps(client, mock_db):
    overrides = {"entries": [
        {"from_player_id": "11", "to_player_id": "12", "segment": "front9", "strokes": 2},
        {"from_player_id": "12", "to_player_id": "11", "segment": "front9", "strokes": -2},
    ]}
    resp = client.put("/api/games/7/handicaps", params={"player_id": "11"},
                      json={"overrides": overrides})

    assert resp.status_code == 200
    _, saved = mock_db.games.save_handicap_overrides.call_args[0]
    assert saved.strokes_owed("11", "12", Segment.FRONT_NINE) == 2


def test_update_handicaps_unknown_player(client, mock_db):
    overrides = {"entries": [
        {"from_player_id": "11", "to_player_id": "99", "segment": "back9", "strokes": 1},
    ]}
    resp = client.put("/api/games/7/handicaps", params={"player_id": "11"},
                      json={"overrides": overrides})
    assert resp.status_code == 422
    mock_db.games.save_handicap_overrides.assert_not_awaited()


def test_update_handicaps_rejects_non_reciprocal(client, mock_db):
    overrides = {"entries": [
        {"from_player_id": "11", "to_player_id": "12", "segment": "front9", "strokes": 2},
        {"from_player_id": "12", "to_player_id": "11", "segment": "front9", "strokes": 2},
    ]}
    resp = client.put("/api/games/7/handicaps", params={"player_id": "11"},
                      json={"overrides": overrides})
    assert resp.status_code == 422


def test_update_animals(client, mock_db):
    resp = client.post("/api/games/7/animals", params={"player_id": "12"},
                       json={"hole_number": 4, "animals": {"12": {"frog": 1, "snake": 0}}})

    assert resp.status_code == 200
    _, hole_number, counts = mock_db.games.save_animal_scores.call_args[0]
    assert hole_number == 4
    assert counts == {"12": {AnimalType.FROG: 1, AnimalType.SNAKE: 0}}


def test_non_numeric_game_id(client):
    pool = MagicMock()
    manager = MagicMock()
    manager.games = GameRepositoryDB(pool)
    app.dependency_overrides[get_db] = lambda: manager
    try:
        resp = client.get("/api/games/abc/scoreboard", params={"player_id": "11"})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 404
    pool.acquire.assert_not_called()


def test_update_animals_unknown_viewer(client, mock_db):
    resp = client.post("/api/games/7/animals", params={"player_id": "99"},
                       json={"hole_number": 4, "animals": {"12": {"frog": 1}}})
    assert resp.status_code == 404
    mock_db.games.save_animal_scores.assert_not_awaited()


def test_update_animals_negative_count(client, mock_db):
    resp = client.post("/api/games/7/animals", params={"player_id": "12"},
                       json={"hole_number": 4, "animals": {"12": {"frog": -1}}})
    assert resp.status_code == 422


def test_database_error_returns_500(client, mock_db):
    mock_db.games.save_scoring_config.side_effect = IntegrityError("fk")
    resp = client.put("/api/games/7/scoring-config", params={"player_id": "11"}, json={})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Database error"}


def test_health_without_database(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "degraded", "database": False}


def test_game_endpoint_without_database(client):
    resp = client.get("/api/games/7/scoreboard", params={"player_id": "11"})
    assert resp.status_code == 503
