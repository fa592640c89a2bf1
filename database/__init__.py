from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import GameRepositoryDB
from database.exceptions import DatabaseError, NotFoundError, IntegrityError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "GameRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "IntegrityError",
]
