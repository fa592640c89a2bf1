import asyncpg

from database.repositories import GameRepositoryDB


class DatabaseManager:
    """Groups the repositories that share one connection pool."""

    def __init__(self, pool: asyncpg.Pool):
        self.games = GameRepositoryDB(pool)
