class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Game, player or hole not found."""


class IntegrityError(DatabaseError):
    """Foreign key violation or stored data that breaks a game invariant."""
