"""Reusable FastAPI dependencies.

The object graph is built here explicitly: engine -> repository -> use case.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from .database import get_engine
from .models import INTEGER_MAX, INTEGER_MIN
from .repositories import UserRepository
from .services import UserSearchService

BIGINT_MAX = 2**63 - 1


def get_user_repository(engine: AsyncEngine = Depends(get_engine)) -> UserRepository:
    """Dependency that yields a repository bound to the shared engine."""
    return UserRepository(engine)


def get_user_search_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserSearchService:
    return UserSearchService(user_repo)


def parse_int(value: str | None, default: int) -> int:
    """Parse a non-negative integer query value, falling back to ``default``.

    Values beyond a signed 64-bit integer count as unparseable.
    """

    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if 0 <= parsed <= BIGINT_MAX else default


def parse_optional_int(value: str | None) -> int | None:
    """Parse an optional integer query value; anything unparseable is ``None``.

    The result is compared against an Integer column, so values outside
    its range count as unparseable too.
    """

    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except ValueError:
        return None
    return parsed if INTEGER_MIN <= parsed <= INTEGER_MAX else None
