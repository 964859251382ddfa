"""
Query construction for the ``ifsc_codes`` table.

Builds parameterized statements for point lookups and multi-field search.
Search statements are cached by shape (which predicates are populated and
whether matching is exact) so that the same SQL text is reused across calls
and the driver's prepared-statement cache can serve it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

TABLE_NAME = "ifsc_codes"

# Predicate order in generated WHERE clauses
SEARCH_FIELDS: tuple[str, ...] = ("bank", "branch", "city", "state")


@dataclass(frozen=True)
class Query:
    """A statement plus its bound parameters."""

    statement: TextClause
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def sql(self) -> str:
        return self.statement.text


class QueryBuilder:
    """Builds point-lookup and search queries with statement reuse."""

    def __init__(self, table: str = TABLE_NAME):
        self._table = table
        self._lookup_statement = text(f"SELECT * FROM {table} WHERE code = :code")
        self._search_statements: dict[tuple[tuple[str, ...], bool], TextClause] = {}
        self._lock = threading.Lock()

    def lookup(self, code: str) -> Query:
        """Point lookup by canonical code (at most one row)."""
        return Query(self._lookup_statement, {"code": code})

    def search(
        self,
        criteria: dict[str, str | None],
        limit: int,
        exact: bool = True,
    ) -> Query | None:
        """Build a search query.

        Args:
            criteria: Predicate values keyed by bank, branch, city, state
            limit: Maximum rows to return
            exact: Use equality when True, substring LIKE when False
                (city always matches exactly against city1 or city2)

        Returns:
            Query, or None when no predicate is populated
        """
        populated = tuple(name for name in SEARCH_FIELDS if criteria.get(name))
        if not populated:
            return None

        params: dict[str, Any] = {}
        for name in populated:
            value = criteria[name]
            if name == "city" or exact:
                params[name] = value
            else:
                params[name] = f"%{value}%"
        params["limit"] = limit

        return Query(self._statement_for(populated, exact), params)

    def statement_count(self) -> int:
        """Number of distinct search shapes compiled so far."""
        with self._lock:
            return len(self._search_statements)

    def _statement_for(self, populated: tuple[str, ...], exact: bool) -> TextClause:
        # City has no partial variant
        if populated == ("city",):
            exact = True
        key = (populated, exact)
        with self._lock:
            statement = self._search_statements.get(key)
            if statement is None:
                statement = text(self._render_search(populated, exact))
                self._search_statements[key] = statement
            return statement

    def _render_search(self, populated: tuple[str, ...], exact: bool) -> str:
        clauses = []
        for name in populated:
            if name == "city":
                clauses.append("(city1 = :city OR city2 = :city)")
            elif exact:
                clauses.append(f"{name} = :{name}")
            else:
                clauses.append(f"{name} LIKE :{name}")
        where = " AND ".join(clauses)
        return f"SELECT * FROM {self._table} WHERE {where} LIMIT :limit"
