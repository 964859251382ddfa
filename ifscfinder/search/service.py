"""Search service - multi-field exact or partial search over the dataset."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ifscfinder.search.schemas import SearchCriteria, SearchOptions
from ifscfinder.storage.models import Record, build_record
from ifscfinder.storage.repositories import IfscRepository

logger = logging.getLogger(__name__)


def _coerce_criteria(criteria: SearchCriteria | Mapping[str, Any] | None) -> SearchCriteria:
    if criteria is None:
        return SearchCriteria()
    if isinstance(criteria, SearchCriteria):
        return criteria
    return SearchCriteria.model_validate(dict(criteria))


def _coerce_options(options: SearchOptions | Mapping[str, Any] | None) -> SearchOptions:
    if options is None:
        return SearchOptions()
    if isinstance(options, SearchOptions):
        return options
    return SearchOptions.model_validate(dict(options))


class SearchService:
    """Uncached search by bank, branch, city and state.

    Results span many rows and many query shapes, so they are never
    written to the lookup cache.
    """

    def __init__(self, repository: IfscRepository):
        self.repository = repository

    def search(
        self,
        criteria: SearchCriteria | Mapping[str, Any] | None = None,
        options: SearchOptions | Mapping[str, Any] | None = None,
    ) -> list[Record]:
        """Search IFSC records.

        Args:
            criteria: bank, branch, city and/or state to match
            options: limit (default 100) and exact (default True)

        Returns:
            Matching Records, at most ``limit``; empty when no predicate is
            populated or the store fails

        Raises:
            pydantic.ValidationError: If options are malformed (e.g. a limit
                outside 0..2**63 - 1)
        """
        criteria = _coerce_criteria(criteria)
        options = _coerce_options(options)

        populated = criteria.populated()
        if not populated:
            return []

        result = self.repository.search(populated, limit=options.limit, exact=options.exact)
        if not result.ok:
            logger.warning("Search %s failed, returning no results: %s", populated, result.error)
            return []

        return [build_record(row) for row in result.rows]
