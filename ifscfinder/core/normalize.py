"""IFSC code normalization.

An IFSC code is an 11-character alphanumeric token. Input is accepted in any
case and with surrounding whitespace; the canonical form is uppercase.
"""

from __future__ import annotations

import re
from typing import Any

IFSC_LENGTH = 11

_ALNUM = re.compile(r"[A-Za-z0-9]+")


def normalize_ifsc_code(code: Any) -> str | None:
    """Validate and canonicalize a raw IFSC code.

    Args:
        code: Raw code, possibly None or padded with whitespace

    Returns:
        The uppercased 11-character code, or None if the input is invalid
    """
    if not code or not isinstance(code, str):
        return None

    trimmed = code.strip()
    if len(trimmed) != IFSC_LENGTH:
        return None

    # ASCII only: str.isalnum() would accept e.g. Devanagari digits
    if not _ALNUM.fullmatch(trimmed):
        return None

    return trimmed.upper()


normalize = normalize_ifsc_code
