from fastapi import HTTPException, Request

from database.db_manager import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """Game repositories for this request; 503 while the pool is down."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise HTTPException(503, "Database is not available")
    return manager
