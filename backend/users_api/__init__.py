"""Multi-tenant user management API."""
