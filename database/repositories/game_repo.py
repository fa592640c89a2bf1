"""Reads and writes for a game's scoring state (scores, turbo, handicaps, animals)."""

import asyncpg
import logging
from pydantic import ValidationError
from typing import Dict, Optional

from models import AnimalType, GameSnapshot, HandicapOverrides, HoleScore, ScoringConfig, TurboValues
from database.converters import (
    hole_score_from_row,
    overrides_to_rows,
    scoring_config_to_row,
    snapshot_from_rows,
    turbo_to_rows,
)
from database.exceptions import IntegrityError, NotFoundError

logger = logging.getLogger(__name__)


def _parse_id(value, kind: str) -> int:
    """Database ids are integers; anything else cannot name a row."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise NotFoundError(f"{kind} {value!r} not found") from None


class GameRepositoryDB:
    """Async access to everything the scoring engine needs for one game."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Private helpers
    # ================================================================

    async def _require_player(self, conn, game_id: int, player_id: int) -> None:
        row = await conn.fetchrow(
            "SELECT id FROM players WHERE id = $1 AND game_id = $2",
            player_id, game_id,
        )
        if not row:
            raise NotFoundError(f"Player {player_id} is not in game {game_id}")

    # ================================================================
    # Read
    # ================================================================

    async def get_snapshot(self, game_id: str) -> Optional[GameSnapshot]:
        """Load a consistent snapshot of a game, or None if it does not exist."""
        try:
            gid = _parse_id(game_id, "Game")
        except NotFoundError:
            return None
        async with self._pool.acquire() as conn:
            game_row = await conn.fetchrow("SELECT * FROM games WHERE id = $1", gid)
            if not game_row:
                return None

            hole_rows = await conn.fetch(
                "SELECT * FROM course_holes WHERE course_id = $1 ORDER BY hole_number",
                game_row["course_id"],
            )
            player_rows = await conn.fetch(
                "SELECT * FROM players WHERE game_id = $1 ORDER BY joined_at, id", gid
            )
            turbo_rows = await conn.fetch(
                "SELECT * FROM game_turbo WHERE game_id = $1 ORDER BY hole_number", gid
            )
            score_rows = await conn.fetch(
                """SELECT s.* FROM scores s
                   JOIN players p ON s.player_id = p.id
                   WHERE p.game_id = $1
                   ORDER BY s.updated_at, s.hole_number""",
                gid,
            )
            handicap_rows = await conn.fetch(
                "SELECT * FROM game_handicap_h2h WHERE game_id = $1", gid
            )
            config_row = await conn.fetchrow(
                "SELECT * FROM game_scoring_config WHERE game_id = $1", gid
            )
            animal_rows = await conn.fetch(
                """SELECT * FROM animal_scores WHERE game_id = $1
                   ORDER BY hole_number, player_id, animal_type""",
                gid,
            )

        try:
            return snapshot_from_rows(
                game_row, hole_rows, player_rows, turbo_rows,
                score_rows, handicap_rows, config_row, animal_rows,
            )
        except ValidationError as e:
            logger.error("Stored data for game %s is invalid: %s", game_id, e)
            raise IntegrityError(f"Stored data for game {game_id} is invalid: {e}") from e

    # ================================================================
    # Write
    # ================================================================

    async def upsert_score(
        self, game_id: str, player_id: str, hole_number: int, strokes: Optional[int]
    ) -> HoleScore:
        """Insert or replace a player's gross score on a hole (latest write wins)."""
        gid, pid = _parse_id(game_id, "Game"), _parse_id(player_id, "Player")
        async with self._pool.acquire() as conn:
            await self._require_player(conn, gid, pid)
            row = await conn.fetchrow(
                """INSERT INTO scores (player_id, hole_number, score, updated_at)
                   VALUES ($1, $2, $3, NOW())
                   ON CONFLICT (player_id, hole_number)
                   DO UPDATE SET score = EXCLUDED.score, updated_at = NOW()
                   RETURNING *""",
                pid, hole_number, strokes,
            )
            return hole_score_from_row(row)

    async def save_turbo_values(self, game_id: str, turbo: TurboValues) -> None:
        """Write the multiplier for all 18 holes."""
        gid = _parse_id(game_id, "Game")
        try:
            async with self._pool.acquire() as conn:
                await conn.executemany(
                    """INSERT INTO game_turbo (game_id, hole_number, multiplier, updated_at)
                       VALUES ($1, $2, $3, NOW())
                       ON CONFLICT (game_id, hole_number)
                       DO UPDATE SET multiplier = EXCLUDED.multiplier, updated_at = NOW()""",
                    turbo_to_rows(gid, turbo),
                )
        except asyncpg.ForeignKeyViolationError as e:
            raise NotFoundError(f"Game {game_id} not found") from e

    async def save_scoring_config(self, game_id: str, config: ScoringConfig) -> None:
        """Replace the game's point table."""
        data = scoring_config_to_row(config)
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    """INSERT INTO game_scoring_config
                           (game_id, hole_in_one, albatross, eagle, birdie, par_or_worse)
                       VALUES ($1, $2, $3, $4, $5, $6)
                       ON CONFLICT (game_id) DO UPDATE SET
                           hole_in_one = EXCLUDED.hole_in_one,
                           albatross = EXCLUDED.albatross,
                           eagle = EXCLUDED.eagle,
                           birdie = EXCLUDED.birdie,
                           par_or_worse = EXCLUDED.par_or_worse""",
                    _parse_id(game_id, "Game"), data["hole_in_one"], data["albatross"],
                    data["eagle"], data["birdie"], data["par_or_worse"],
                )
        except asyncpg.ForeignKeyViolationError as e:
            raise NotFoundError(f"Game {game_id} not found") from e

    async def save_handicap_overrides(self, game_id: str, overrides: HandicapOverrides) -> None:
        """Replace the game's override table, writing both directions of every pair."""
        gid = _parse_id(game_id, "Game")
        rows = overrides_to_rows(gid, overrides)
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    await conn.execute("DELETE FROM game_handicap_h2h WHERE game_id = $1", gid)
                    if rows:
                        await conn.executemany(
                            """INSERT INTO game_handicap_h2h
                                   (game_id, from_player_id, to_player_id,
                                    front9_strokes, back9_strokes)
                               VALUES ($1, $2, $3, $4, $5)""",
                            rows,
                        )
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(f"Handicap table for game {game_id} references an unknown player") from e

    async def save_animal_scores(
        self,
        game_id: str,
        hole_number: int,
        counts: Dict[str, Dict[AnimalType, int]],
    ) -> None:
        """Set animal counts on a hole for several players. Zero counts delete the record."""
        gid = _parse_id(game_id, "Game")
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                for player_id, by_animal in counts.items():
                    pid = _parse_id(player_id, "Player")
                    await self._require_player(conn, gid, pid)
                    for animal_type, count in by_animal.items():
                        animal = AnimalType(animal_type).value
                        if count > 0:
                            await conn.execute(
                                """INSERT INTO animal_scores
                                       (game_id, player_id, hole_number, animal_type, count, updated_at)
                                   VALUES ($1, $2, $3, $4, $5, NOW())
                                   ON CONFLICT (game_id, player_id, hole_number, animal_type)
                                   DO UPDATE SET count = EXCLUDED.count, updated_at = NOW()""",
                                gid, pid, hole_number, animal, count,
                            )
                        else:
                            await conn.execute(
                                """DELETE FROM animal_scores
                                   WHERE game_id = $1 AND player_id = $2
                                     AND hole_number = $3 AND animal_type = $4""",
                                gid, pid, hole_number, animal,
                            )
