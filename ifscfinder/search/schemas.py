"""Pydantic schemas for search criteria and options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SEARCH_LIMIT = 100
MAX_SEARCH_LIMIT = 2**63 - 1


class SearchCriteria(BaseModel):
    """Predicates for a search; empty values are ignored."""

    # Unknown keys are dropped; numeric values are matched as text
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    bank: str | None = None
    branch: str | None = None
    city: str | None = None  # matches CITY1 or CITY2, always exact
    state: str | None = None

    def populated(self) -> dict[str, str]:
        """Predicates that will become WHERE clauses."""
        return {name: value for name, value in self.model_dump().items() if value}


class SearchOptions(BaseModel):
    """Result limit and matching mode."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Upper bound is SQLite's 64-bit signed integer range
    limit: int = Field(default=DEFAULT_SEARCH_LIMIT, ge=0, le=MAX_SEARCH_LIMIT)
    exact: bool = True  # False -> substring (LIKE) match for bank, branch, state
