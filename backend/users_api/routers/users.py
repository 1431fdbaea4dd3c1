"""Tenant-scoped user endpoints."""
from datetime import datetime

from fastapi import APIRouter, Depends, Path, Query, Response, status

from ..dependencies import (
    get_user_repository,
    get_user_search_service,
    parse_int,
    parse_optional_int,
)
from ..models import INTEGER_MAX
from ..repositories import UserRepository
from ..schemas import User, UserCreate, UserRead, UserSearchResponse, UserUpdate
from ..security import hash_password
from ..services import UserSearchInput, UserSearchService
from ..services.user_search import DEFAULT_LIMIT, DEFAULT_OFFSET
from ..tenancy import validate_tenant_id

router = APIRouter(prefix="/{tenant_id}/Users", tags=["users"])


def tenant_path(tenant_id: str) -> str:
    """Reject malformed tenant ids before any handler runs."""
    return validate_tenant_id(tenant_id)


@router.get("", response_model=UserSearchResponse)
async def search_users(
    tenant_id: str = Depends(tenant_path),
    user_name: str = "",
    email: str = "",
    user_type: str | None = Query(default=None, alias="type"),
    limit: str | None = None,
    offset: str | None = None,
    search: UserSearchService = Depends(get_user_search_service),
) -> UserSearchResponse:
    """Search a tenant's users by name, email and type."""

    items, total = await search.execute(
        UserSearchInput(
            tenant_id=tenant_id,
            user_name=user_name,
            email=email,
            user_type=parse_optional_int(user_type),
            limit=parse_int(limit, DEFAULT_LIMIT),
            offset=parse_int(offset, DEFAULT_OFFSET),
        )
    )
    return UserSearchResponse(items=items, total=total)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    tenant_id: str = Depends(tenant_path),
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Create a user in the tenant's table."""

    user = User(
        **payload.model_dump(exclude={"password"}),
        password_hash=hash_password(payload.password),
        last_update_password=datetime.utcnow(),
    )
    return await user_repo.create(tenant_id, user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int = Path(ge=1, le=INTEGER_MAX),
    tenant_id: str = Depends(tenant_path),
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Return a single user."""

    return await user_repo.find_by_id(tenant_id, user_id)


@router.put("/{user_id}", response_model=UserRead)
async def replace_user(
    payload: UserUpdate,
    user_id: int = Path(ge=1, le=INTEGER_MAX),
    tenant_id: str = Depends(tenant_path),
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Replace every field of a user.

    The stored password hash is kept unless a new password is supplied.
    """

    current = await user_repo.find_by_id(tenant_id, user_id)
    user = User(
        id=user_id,
        **payload.model_dump(exclude={"password"}),
        password_hash=current.password_hash,
        last_update_password=current.last_update_password,
    )
    if payload.password is not None:
        user.password_hash = hash_password(payload.password)
        user.last_update_password = datetime.utcnow()
    return await user_repo.update(tenant_id, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Path(ge=1, le=INTEGER_MAX),
    tenant_id: str = Depends(tenant_path),
    user_repo: UserRepository = Depends(get_user_repository),
) -> Response:
    """Delete a user."""

    await user_repo.delete(tenant_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
