"""
Record model for IFSC rows.

A Record is a read-only mapping from uppercase field name to string value.
Blank and NULL columns are omitted rather than exposed as empty values.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

Record = Mapping[str, str]

# Fields present in the bundled dataset, in column order
FIELDS: tuple[str, ...] = (
    "CODE",
    "BANK",
    "BRANCH",
    "ADDRESS",
    "CITY1",
    "CITY2",
    "STATE",
    "STD_CODE",
)


def build_record(row: Mapping[str, Any]) -> Record:
    """Build a Record from a database row mapping.

    Column names are uppercased and values trimmed; NULL or blank values
    are dropped.

    Args:
        row: Column name -> value mapping for one row

    Returns:
        Read-only Record (possibly empty)
    """
    fields: dict[str, str] = {}
    for key, value in row.items():
        if value is None:
            continue
        cleaned = str(value).strip()
        if cleaned:
            fields[str(key).upper()] = cleaned
    return MappingProxyType(fields)

