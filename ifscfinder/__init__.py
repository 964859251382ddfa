"""ifscfinder - fast, cached IFSC code lookup backed by a bundled SQLite dataset.

Environment Variables:
    IFSCFINDER_DB_PATH: Path to an alternative dataset file.
    IFSCFINDER_CACHE_SIZE: Lookup cache capacity (default 1024).
"""

from .core.normalize import normalize, normalize_ifsc_code
from .storage.database import set_db_path
from .storage.models import Record
from .search.schemas import SearchCriteria, SearchOptions
from .api import (
    clear_cache,
    get_cache_stats,
    ifsc_to_address,
    ifsc_to_bank,
    ifsc_to_branch,
    ifsc_to_city1,
    ifsc_to_city2,
    ifsc_to_state,
    ifsc_to_std_code,
    lookup,
    reset_all,
    search,
)

__version__ = "0.1.0"

__all__ = [
    # Normalization
    "normalize",
    "normalize_ifsc_code",
    # Lookup
    "Record",
    "lookup",
    "ifsc_to_bank",
    "ifsc_to_branch",
    "ifsc_to_address",
    "ifsc_to_city1",
    "ifsc_to_city2",
    "ifsc_to_state",
    "ifsc_to_std_code",
    # Search
    "SearchCriteria",
    "SearchOptions",
    "search",
    # Cache and lifecycle
    "clear_cache",
    "get_cache_stats",
    "set_db_path",
    "reset_all",
]
