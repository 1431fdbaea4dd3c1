from .user_search import UserSearchInput, UserSearchService

__all__ = ["UserSearchInput", "UserSearchService"]
