"""Storage domain - dataset connection, lookup cache, queries and repository."""

# Database
from ifscfinder.storage.database import (
    get_db,
    get_db_path,
    set_db_path,
    reset_db_path,
    get_engine,
    reset_engine,
)

# Records
from ifscfinder.storage.models import FIELDS, Record, build_record

# Cache
from ifscfinder.storage.cache import (
    MISSING,
    LRUCache,
    get_cache,
    reset_cache,
)

# Queries
from ifscfinder.storage.queries import Query, QueryBuilder, SEARCH_FIELDS, TABLE_NAME

# Repositories
from ifscfinder.storage.repositories import IfscRepository, StoreResult

__all__ = [
    # Database
    "get_db",
    "get_db_path",
    "set_db_path",
    "reset_db_path",
    "get_engine",
    "reset_engine",
    # Records
    "FIELDS",
    "Record",
    "build_record",
    # Cache
    "MISSING",
    "LRUCache",
    "get_cache",
    "reset_cache",
    # Queries
    "Query",
    "QueryBuilder",
    "SEARCH_FIELDS",
    "TABLE_NAME",
    # Repositories
    "IfscRepository",
    "StoreResult",
]
