from .user import UserRepository, search_criteria

__all__ = ["UserRepository", "search_criteria"]
