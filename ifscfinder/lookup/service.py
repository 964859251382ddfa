"""
Lookup service - normalize, consult the cache, query on a miss.

Invalid input, missing rows and store failures all surface as None.
Not-found results are cached so repeated misses never reach the store.
"""

from __future__ import annotations

import logging

from ifscfinder.core.normalize import normalize_ifsc_code
from ifscfinder.storage.cache import MISSING, LRUCache
from ifscfinder.storage.models import Record, build_record
from ifscfinder.storage.repositories import IfscRepository

logger = logging.getLogger(__name__)


class LookupService:
    """Cached point lookups of IFSC codes."""

    def __init__(self, repository: IfscRepository, cache: LRUCache):
        self.repository = repository
        self.cache = cache

    def lookup(self, code: str | None) -> Record | None:
        """Look up the details for an IFSC code.

        Args:
            code: IFSC code in any case, surrounding whitespace allowed

        Returns:
            Record with uppercase field names, or None if the code is
            invalid or unknown
        """
        normalized = normalize_ifsc_code(code)
        if normalized is None:
            return None

        cached = self.cache.get(normalized)
        if cached is not MISSING:
            return cached

        record = self._fetch(normalized)
        self.cache.set(normalized, record)
        return record

    def _fetch(self, code: str) -> Record | None:
        result = self.repository.find_by_code(code)
        if not result.ok:
            logger.warning("Lookup of %s failed, treating as not found: %s", code, result.error)
            return None

        row = result.first()
        if row is None:
            return None

        record = build_record(row)
        return record if record else None

    # =========================================================================
    # Field projections
    # =========================================================================

    def field(self, code: str | None, name: str) -> str | None:
        """Get one field of a lookup result, or None if unavailable."""
        record = self.lookup(code)
        if record is None:
            return None
        return record.get(name)

    def bank(self, code: str | None) -> str | None:
        return self.field(code, "BANK")

    def branch(self, code: str | None) -> str | None:
        return self.field(code, "BRANCH")

    def address(self, code: str | None) -> str | None:
        return self.field(code, "ADDRESS")

    def city1(self, code: str | None) -> str | None:
        return self.field(code, "CITY1")

    def city2(self, code: str | None) -> str | None:
        return self.field(code, "CITY2")

    def state(self, code: str | None) -> str | None:
        return self.field(code, "STATE")

    def std_code(self, code: str | None) -> str | None:
        return self.field(code, "STD_CODE")
