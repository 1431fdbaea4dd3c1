"""Column layout of a tenant's ``users_<tenant_id>`` table."""
from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, String, Table, Text

from ..tenancy import tenant_table_name
from .base import new_metadata

# Columns returned to clients; password_hash and otp_secret_key stay internal
PUBLIC_COLUMNS = (
    "id",
    "user_name",
    "email",
    "type",
    "authority_data",
    "failed_count",
    "unlock_at",
    "is_reset_password",
    "last_update_password",
)

SECRET_COLUMNS = ("password_hash", "otp_secret_key")

# Range of the Integer columns (PostgreSQL int4)
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


def users_table(tenant_id: str, metadata: MetaData | None = None) -> Table:
    """Describe the users table for ``tenant_id``.

    The tenant id is validated before it becomes part of the table name.
    """

    return Table(
        tenant_table_name(tenant_id),
        metadata if metadata is not None else new_metadata(),
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("user_name", String, nullable=False),
        Column("email", String, nullable=False),
        Column("password_hash", String, nullable=False),
        Column("otp_secret_key", String, nullable=True),
        Column("type", Integer, nullable=False),
        Column("authority_data", Text, nullable=True),
        Column("failed_count", Integer, nullable=False, default=0),
        Column("unlock_at", DateTime, nullable=True),
        Column("is_reset_password", Boolean, nullable=False, default=False),
        Column("last_update_password", DateTime, nullable=False),
    )
