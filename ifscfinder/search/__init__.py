"""Search domain - multi-field search over the IFSC dataset."""

from .schemas import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, SearchCriteria, SearchOptions
from .service import SearchService

__all__ = [
    # Services
    "SearchService",
    # Schemas
    "SearchCriteria",
    "SearchOptions",
    "DEFAULT_SEARCH_LIMIT",
    "MAX_SEARCH_LIMIT",
]
