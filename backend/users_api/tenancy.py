"""Tenant identifier validation and table-name derivation.

Tenant ids end up inside SQL as identifiers, never as bound values, so
every statement must obtain its table name from ``tenant_table_name``.
"""
import re

from .exceptions import InvalidTenantError

TABLE_PREFIX = "users_"

# Leaves room for derived names such as pk_users_<tenant> under PostgreSQL's
# 63 character identifier limit
MAX_TENANT_ID_LENGTH = 48

_TENANT_ID_RE = re.compile(r"[A-Za-z0-9_]+")


def validate_tenant_id(tenant_id: str) -> str:
    """Return ``tenant_id`` unchanged, or raise if it is not allow-listed."""

    if (
        not isinstance(tenant_id, str)
        or len(tenant_id) > MAX_TENANT_ID_LENGTH
        or _TENANT_ID_RE.fullmatch(tenant_id) is None
    ):
        raise InvalidTenantError(tenant_id)
    return tenant_id


def tenant_table_name(tenant_id: str) -> str:
    """Return the name of the table that holds ``tenant_id``'s users."""

    return f"{TABLE_PREFIX}{validate_tenant_id(tenant_id)}"
