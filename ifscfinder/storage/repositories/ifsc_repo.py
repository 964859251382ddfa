"""
IFSC repository for dataset queries.

Every call returns a StoreResult instead of raising, so the service layer
can downgrade store failures to a not-found result in one place.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from ifscfinder.storage.database import get_db
from ifscfinder.storage.queries import Query, QueryBuilder


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a store call: rows on success, an error message on failure."""

    ok: bool
    rows: list[Mapping[str, Any]] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def success(cls, rows: list[Mapping[str, Any]]) -> StoreResult:
        return cls(ok=True, rows=rows)

    @classmethod
    def failure(cls, error: str) -> StoreResult:
        """Create a failed result.

        Args:
            error: Description of the underlying store error

        Returns:
            StoreResult with ok=False and no rows
        """
        return cls(ok=False, error=error)

    def first(self) -> Mapping[str, Any] | None:
        return self.rows[0] if self.rows else None


class IfscRepository:
    """Read-only access to the ``ifsc_codes`` table."""

    def __init__(self, builder: QueryBuilder | None = None):
        self.builder = builder or QueryBuilder()

    def find_by_code(self, code: str) -> StoreResult:
        """Fetch the row for a canonical code.

        Args:
            code: Normalized IFSC code

        Returns:
            StoreResult with zero or one row
        """
        return self._execute(self.builder.lookup(code), single=True)

    def search(
        self,
        criteria: dict[str, str | None],
        limit: int,
        exact: bool = True,
    ) -> StoreResult:
        """Fetch rows matching the populated criteria.

        Args:
            criteria: Predicate values keyed by bank, branch, city, state
            limit: Maximum rows to return
            exact: Exact (=) or partial (LIKE) matching

        Returns:
            StoreResult; empty success when no predicate is populated
        """
        query = self.builder.search(criteria, limit=limit, exact=exact)
        if query is None:
            return StoreResult.success([])
        return self._execute(query)

    def _execute(self, query: Query, single: bool = False) -> StoreResult:
        try:
            with get_db() as conn:
                result = conn.execute(query.statement, query.params).mappings()
                if single:
                    row = result.first()
                    rows = [dict(row)] if row is not None else []
                else:
                    rows = [dict(row) for row in result.all()]
        # Binding errors (huge integers, lone surrogates) surface unwrapped
        except (SQLAlchemyError, OverflowError, UnicodeError) as e:
            return StoreResult.failure(f"{type(e).__name__}: {e}")
        return StoreResult.success(rows)
