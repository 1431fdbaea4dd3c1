"""Test fixtures for the backend."""
import os
from datetime import datetime
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_users_api.db"

from users_api.database import create_tenant_table, drop_tenant_table, engine  # noqa: E402
from users_api.main import app  # noqa: E402
from users_api.repositories import UserRepository  # noqa: E402
from users_api.schemas import User  # noqa: E402

test_db_path = Path("test_users_api.db")

TENANTS = ("acme", "globex")


@pytest.fixture(scope="session", autouse=True)
def remove_database_file():
    """Delete the SQLite file once the session ends."""

    yield
    if test_db_path.exists():
        test_db_path.unlink()


@pytest_asyncio.fixture
async def tenant_tables():
    """Give every test empty tables for the known tenants."""

    for tenant_id in TENANTS:
        await create_tenant_table(engine, tenant_id)
    yield
    for tenant_id in TENANTS:
        await drop_tenant_table(engine, tenant_id)


@pytest.fixture
def user_repo(tenant_tables) -> UserRepository:
    return UserRepository(engine)


@pytest.fixture
def make_user():
    """Build an unsaved User with sensible defaults."""

    def _make_user(**overrides) -> User:
        values = {
            "user_name": "alice",
            "email": "a@x.com",
            "password_hash": "pbkdf2-hash",
            "otp_secret_key": "OTPSECRET",
            "type": 1,
            "authority_data": '{"roles": ["admin"]}',
            "failed_count": 0,
            "unlock_at": None,
            "is_reset_password": False,
            "last_update_password": datetime(2024, 1, 2, 3, 4, 5),
        }
        values.update(overrides)
        return User(**values)

    return _make_user


@pytest_asyncio.fixture
async def client(tenant_tables) -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
