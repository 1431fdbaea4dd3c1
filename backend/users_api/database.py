"""Async engine shared by every request."""
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from .config import Settings, get_settings
from .models import users_table


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for PostgreSQL, or SQLite in local runs."""

    if settings.is_sqlite:
        # aiosqlite connections must not outlive the event loop that opened them
        return create_async_engine(
            settings.database_url,
            future=True,
            echo=False,
            poolclass=NullPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        settings.database_url,
        future=True,
        echo=False,
        pool_pre_ping=True,
        connect_args={"ssl": settings.db_sslmode},
    )


engine = build_engine(get_settings())


def get_engine() -> AsyncEngine:
    """Return the process-wide engine."""

    return engine


async def create_tenant_table(engine: AsyncEngine, tenant_id: str) -> None:
    """Create ``users_<tenant_id>`` if it does not exist yet."""

    table = users_table(tenant_id)
    async with engine.begin() as conn:
        await conn.run_sync(table.create, checkfirst=True)


async def drop_tenant_table(engine: AsyncEngine, tenant_id: str) -> None:
    """Drop ``users_<tenant_id>`` and every row in it."""

    table = users_table(tenant_id)
    async with engine.begin() as conn:
        await conn.run_sync(table.drop, checkfirst=True)
