"""Tenant-scoped persistence for users."""
import logging
from typing import Any

from sqlalchemy import ColumnElement, Table, delete, func, insert, select, true, update
from sqlalchemy.ext.asyncio import AsyncEngine

from ..exceptions import UserNotFoundError
from ..models import PUBLIC_COLUMNS, users_table
from ..schemas import User, UserRead

logger = logging.getLogger(__name__)


def search_criteria(
    table: Table,
    user_name: str = "",
    email: str = "",
    user_type: int | None = None,
) -> list[ColumnElement[bool]]:
    """Build the WHERE predicates for a user search.

    Text filters match case-insensitively anywhere in the column, with
    ``%`` and ``_`` in the input taken literally. Every value is bound.
    """

    criteria: list[ColumnElement[bool]] = [true()]
    if user_name:
        criteria.append(table.c.user_name.icontains(user_name, autoescape=True))
    if email:
        criteria.append(table.c.email.icontains(email, autoescape=True))
    if user_type is not None:
        criteria.append(table.c.type == user_type)
    return criteria


class UserRepository:
    """Reads and writes rows in ``users_<tenant_id>`` tables.

    Each call checks a connection out of the engine's pool and returns it
    before the call completes. Writes run in a transaction that is rolled
    back if the awaiting task is cancelled.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @staticmethod
    def _row_values(user: User) -> dict[str, Any]:
        return user.model_dump(exclude={"id"})

    async def create(self, tenant_id: str, user: User) -> User:
        """Insert ``user`` and store the generated id back on it."""

        table = users_table(tenant_id)
        stmt = insert(table).values(**self._row_values(user)).returning(table.c.id)
        async with self._engine.begin() as conn:
            user.id = (await conn.execute(stmt)).scalar_one()
        logger.info("Created user %s in %s", user.id, table.name)
        return user

    async def find_by_id(self, tenant_id: str, user_id: int) -> User:
        """Return the full record for ``user_id``, including secrets."""

        table = users_table(tenant_id)
        stmt = select(table).where(table.c.id == user_id)
        async with self._engine.connect() as conn:
            row = (await conn.execute(stmt)).mappings().one_or_none()
        if row is None:
            raise UserNotFoundError(tenant_id, user_id)
        return User.model_validate(dict(row))

    async def update(self, tenant_id: str, user: User) -> User:
        """Replace every non-id field of the row matching ``user.id``."""

        if user.id is None:
            raise ValueError("Cannot update a user without an id")
        table = users_table(tenant_id)
        stmt = update(table).where(table.c.id == user.id).values(**self._row_values(user))
        async with self._engine.begin() as conn:
            result = await conn.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError(tenant_id, user.id)
        logger.info("Updated user %s in %s", user.id, table.name)
        return user

    async def delete(self, tenant_id: str, user_id: int) -> None:
        """Remove the row matching ``user_id``."""

        table = users_table(tenant_id)
        stmt = delete(table).where(table.c.id == user_id)
        async with self._engine.begin() as conn:
            result = await conn.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError(tenant_id, user_id)
        logger.info("Deleted user %s from %s", user_id, table.name)

    async def search(
        self,
        tenant_id: str,
        user_name: str = "",
        email: str = "",
        user_type: int | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[UserRead], int]:
        """Return one page of matching users and the total match count.

        Pages are ordered by id so concurrent inserts do not reshuffle
        rows that were already served.
        """

        table = users_table(tenant_id)
        criteria = search_criteria(table, user_name, email, user_type)

        count_stmt = select(func.count()).select_from(table).where(*criteria)
        page_stmt = (
            select(*(table.c[name] for name in PUBLIC_COLUMNS))
            .where(*criteria)
            .order_by(table.c.id)
            .limit(limit)
            .offset(offset)
        )

        async with self._engine.connect() as conn:
            total = (await conn.execute(count_stmt)).scalar_one()
            rows = (await conn.execute(page_stmt)).mappings().all()

        logger.debug(
            "Search on %s matched %d rows, returning %d", table.name, total, len(rows)
        )
        return [UserRead.model_validate(dict(row)) for row in rows], total
