"""
Create the users table for one or more tenants.

Usage:
  python scripts/provision_tenant.py acme globex

Connection settings come from the same DB_* / DATABASE_URL environment
variables the API reads. Existing tables are left untouched.
"""

import asyncio
import sys

from users_api.database import create_tenant_table, engine
from users_api.exceptions import InvalidTenantError
from users_api.tenancy import tenant_table_name


async def provision(tenant_ids: list[str]) -> int:
    failures = 0
    try:
        for tenant_id in tenant_ids:
            try:
                await create_tenant_table(engine, tenant_id)
            except InvalidTenantError as exc:
                print(f"SKIP: {exc}")
                failures += 1
                continue
            print(f"OK: {tenant_table_name(tenant_id)}")
    finally:
        await engine.dispose()
    return failures


def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__)
        return 2
    return 1 if asyncio.run(provision(argv)) else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
