"""Table definitions exposed by the backend."""
from .base import NAMING_CONVENTION, new_metadata
from .user import INTEGER_MAX, INTEGER_MIN, PUBLIC_COLUMNS, SECRET_COLUMNS, users_table

__all__ = [
    "INTEGER_MAX",
    "INTEGER_MIN",
    "NAMING_CONVENTION",
    "PUBLIC_COLUMNS",
    "SECRET_COLUMNS",
    "new_metadata",
    "users_table",
]
