from .game_repo import GameRepositoryDB

__all__ = ["GameRepositoryDB"]
