"""
Public lookup and search functions.

This module is the single composition point for the process-wide
singletons: the dataset engine, the lookup cache, the repository (with its
statement cache) and the two services built on top of them. Everything is
created on first use and torn down by ``reset_all``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ifscfinder.lookup import LookupService
from ifscfinder.search import SearchCriteria, SearchOptions, SearchService
from ifscfinder.storage.cache import get_cache, reset_cache
from ifscfinder.storage.database import reset_engine
from ifscfinder.storage.models import Record
from ifscfinder.storage.repositories import IfscRepository

_repository: IfscRepository | None = None
_lookup_service: LookupService | None = None
_search_service: SearchService | None = None


def get_repository() -> IfscRepository:
    """Get or create the shared repository."""
    global _repository
    if _repository is None:
        _repository = IfscRepository()
    return _repository


def get_lookup_service() -> LookupService:
    """Get or create the shared lookup service."""
    global _lookup_service
    if _lookup_service is None:
        _lookup_service = LookupService(get_repository(), get_cache())
    return _lookup_service


def get_search_service() -> SearchService:
    """Get or create the shared search service."""
    global _search_service
    if _search_service is None:
        _search_service = SearchService(get_repository())
    return _search_service


# =============================================================================
# Lookup
# =============================================================================


def lookup(code: str | None) -> Record | None:
    """Look up IFSC code details, with caching.

    Args:
        code: 11-character IFSC code (case-insensitive)

    Returns:
        Record with uppercase field names, or None if invalid or not found

    Example:
        details = lookup("SBIN0000001")
        if details:
            print(details["BANK"], details["BRANCH"])
    """
    return get_lookup_service().lookup(code)


def ifsc_to_bank(code: str | None) -> str | None:
    """Get the bank name for an IFSC code."""
    return get_lookup_service().bank(code)


def ifsc_to_branch(code: str | None) -> str | None:
    """Get the branch name for an IFSC code."""
    return get_lookup_service().branch(code)


def ifsc_to_address(code: str | None) -> str | None:
    """Get the branch address for an IFSC code."""
    return get_lookup_service().address(code)


def ifsc_to_city1(code: str | None) -> str | None:
    return get_lookup_service().city1(code)


def ifsc_to_city2(code: str | None) -> str | None:
    return get_lookup_service().city2(code)


def ifsc_to_state(code: str | None) -> str | None:
    """Get the state for an IFSC code."""
    return get_lookup_service().state(code)


def ifsc_to_std_code(code: str | None) -> str | None:
    """Get the STD (telephone trunk) code for an IFSC code."""
    return get_lookup_service().std_code(code)


# =============================================================================
# Search
# =============================================================================


def search(
    criteria: SearchCriteria | Mapping[str, Any] | None = None,
    options: SearchOptions | Mapping[str, Any] | None = None,
) -> list[Record]:
    """Search IFSC records by bank, branch, city or state.

    Example:
        # Exact match
        search({"bank": "STATE BANK OF INDIA"})

        # Partial match
        search({"bank": "HDFC"}, {"exact": False, "limit": 50})
    """
    return get_search_service().search(criteria, options)


# =============================================================================
# Cache and lifecycle
# =============================================================================


def clear_cache() -> None:
    """Empty the lookup cache (e.g. after pointing at a new dataset)."""
    get_cache().clear()


def get_cache_stats() -> dict[str, Any]:
    """Get lookup cache statistics (size, hits, misses, evictions)."""
    return get_cache().get_stats()


def reset_all() -> None:
    """Close the dataset and drop every singleton (for testing)."""
    global _repository, _lookup_service, _search_service
    reset_engine()
    reset_cache()
    _repository = None
    _lookup_service = None
    _search_service = None
