"""Errors raised by the tenant-scoped persistence layer."""


class UsersApiError(Exception):
    """Base class for errors the HTTP layer knows how to report."""


class InvalidTenantError(UsersApiError, ValueError):
    """The tenant identifier cannot be used to select a table."""

    def __init__(self, tenant_id: str) -> None:
        super().__init__(f"Invalid tenant id: {tenant_id!r}")
        self.tenant_id = tenant_id


class UserNotFoundError(UsersApiError, LookupError):
    """No row with the requested id exists in the tenant's table."""

    def __init__(self, tenant_id: str, user_id: int) -> None:
        super().__init__(f"User {user_id} not found for tenant {tenant_id!r}")
        self.tenant_id = tenant_id
        self.user_id = user_id
