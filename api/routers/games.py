"""Game endpoints backed by the database. Every write returns the recomputed scoreboard."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_db
from api.schemas import AnimalUpdate, HandicapUpdate, ScoreUpdate, TurboUpdate
from database.db_manager import DatabaseManager
from database.exceptions import IntegrityError, NotFoundError
from models import GameSnapshot, ScoringConfig, TurboValues
from scoring import Scoreboard, build_scoreboard

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_snapshot(db: DatabaseManager, game_id: str) -> GameSnapshot:
    try:
        snapshot = await db.games.get_snapshot(game_id)
    except IntegrityError as e:
        raise HTTPException(409, str(e))
    if snapshot is None:
        raise HTTPException(404, "Game not found")
    return snapshot


def _scoreboard_for(snapshot: GameSnapshot, player_id: str) -> Scoreboard:
    if snapshot.get_player(player_id) is None:
        raise HTTPException(404, f"Player {player_id} is not in this game")
    return build_scoreboard(snapshot, player_id)


async def _require_player(db: DatabaseManager, game_id: str, player_id: str) -> GameSnapshot:
    snapshot = await _load_snapshot(db, game_id)
    if snapshot.get_player(player_id) is None:
        raise HTTPException(404, f"Player {player_id} is not in this game")
    return snapshot


async def _require_host(db: DatabaseManager, game_id: str, player_id: str) -> GameSnapshot:
    snapshot = await _require_player(db, game_id, player_id)
    if not snapshot.get_player(player_id).is_host:
        raise HTTPException(403, "Only the host can change game settings")
    return snapshot


@router.get("/{game_id}/scoreboard", response_model=Scoreboard)
async def get_scoreboard(
    game_id: str,
    player_id: str = Query(..., description="Viewing player"),
    db: DatabaseManager = Depends(get_db),
):
    snapshot = await _load_snapshot(db, game_id)
    return _scoreboard_for(snapshot, player_id)


@router.post("/{game_id}/scores", response_model=Scoreboard)
async def submit_score(game_id: str, req: ScoreUpdate, db: DatabaseManager = Depends(get_db)):
    try:
        await db.games.upsert_score(game_id, req.player_id, req.hole_number, req.strokes)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    snapshot = await _load_snapshot(db, game_id)
    return _scoreboard_for(snapshot, req.player_id)


@router.put("/{game_id}/turbo", response_model=Scoreboard)
async def update_turbo(
    game_id: str,
    req: TurboUpdate,
    player_id: str = Query(..., description="Acting host"),
    db: DatabaseManager = Depends(get_db),
):
    await _require_host(db, game_id, player_id)
    try:
        if req.preset:
            turbo = TurboValues.from_preset(req.preset)
        else:
            turbo = TurboValues(multipliers=req.multipliers)
    except ValueError as e:
        raise HTTPException(422, str(e))

    await db.games.save_turbo_values(game_id, turbo)
    logger.info("Game %s turbo set to %s", game_id, turbo.detect_preset())
    snapshot = await _load_snapshot(db, game_id)
    return _scoreboard_for(snapshot, player_id)


@router.put("/{game_id}/scoring-config", response_model=Scoreboard)
async def update_scoring_config(
    game_id: str,
    req: ScoringConfig,
    player_id: str = Query(..., description="Acting host"),
    db: DatabaseManager = Depends(get_db),
):
    await _require_host(db, game_id, player_id)
    await db.games.save_scoring_config(game_id, req)
    snapshot = await _load_snapshot(db, game_id)
    return _scoreboard_for(snapshot, player_id)


@router.put("/{game_id}/handicaps", response_model=Scoreboard)
async def update_handicaps(
    game_id: str,
    req: HandicapUpdate,
    player_id: str = Query(..., description="Acting host"),
    db: DatabaseManager = Depends(get_db),
):
    snapshot = await _require_host(db, game_id, player_id)
    unknown = [pid for pid in req.overrides.player_ids() if snapshot.get_player(pid) is None]
    if unknown:
        raise HTTPException(422, f"Unknown players in handicap table: {', '.join(unknown)}")

    try:
        await db.games.save_handicap_overrides(game_id, req.overrides)
    except IntegrityError as e:
        raise HTTPException(409, str(e))
    snapshot = await _load_snapshot(db, game_id)
    return _scoreboard_for(snapshot, player_id)


@router.post("/{game_id}/animals", response_model=Scoreboard)
async def update_animals(
    game_id: str,
    req: AnimalUpdate,
    player_id: str = Query(..., description="Viewing player"),
    db: DatabaseManager = Depends(get_db),
):
    await _require_player(db, game_id, player_id)
    try:
        await db.games.save_animal_scores(game_id, req.hole_number, req.animals)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    snapshot = await _load_snapshot(db, game_id)
    return _scoreboard_for(snapshot, player_id)
