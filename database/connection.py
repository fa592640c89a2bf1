import asyncpg
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Per-statement limit on every pooled connection
COMMAND_TIMEOUT_SECONDS = 10.0


class DatabasePool:
    """Owns the asyncpg pool shared by every game request."""

    def __init__(self, application_name: str = "golf-h2h"):
        self._pool: Optional[asyncpg.Pool] = None
        self._application_name = application_name

    @property
    def is_initialized(self) -> bool:
        return self._pool is not None

    async def initialize(
        self,
        dsn: Optional[str] = None,
        *,
        host: str = "localhost",
        port: int = 5432,
        database: str = "golf_h2h",
        user: str = "postgres",
        password: str = "",
        min_size: int = 2,
        max_size: int = 10,
    ) -> None:
        """Open the pool. A DSN takes precedence over the individual settings."""
        if self._pool is not None:
            return
        connect_args = {"dsn": dsn} if dsn else {
            "host": host, "port": port, "database": database,
            "user": user, "password": password,
        }
        self._pool = await asyncpg.create_pool(
            **connect_args,
            min_size=min_size,
            max_size=max_size,
            command_timeout=COMMAND_TIMEOUT_SECONDS,
            server_settings={"application_name": self._application_name},
        )
        logger.info("Database pool ready (min=%d, max=%d)", min_size, max_size)

    async def close(self) -> None:
        if self._pool:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed")

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call await db.initialize() first.")
        return self._pool

    async def health_check(self) -> bool:
        """True when a pooled connection answers SELECT 1."""
        if self._pool is None:
            return False
        try:
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (OSError, asyncpg.PostgresError) as e:
            logger.warning("Database health check failed: %s", e)
            return False


db = DatabasePool()
