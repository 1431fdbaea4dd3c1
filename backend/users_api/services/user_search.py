"""User search use case."""
from dataclasses import dataclass

from ..repositories import UserRepository
from ..schemas import UserRead

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0


@dataclass(frozen=True)
class UserSearchInput:
    """Search parameters as parsed from the request."""

    tenant_id: str
    user_name: str = ""
    email: str = ""
    user_type: int | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


class UserSearchService:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, data: UserSearchInput) -> tuple[list[UserRead], int]:
        """Run the search and return the repository's page and total unchanged."""
        return await self._user_repo.search(
            data.tenant_id,
            user_name=data.user_name,
            email=data.email,
            user_type=data.user_type,
            limit=data.limit,
            offset=data.offset,
        )
