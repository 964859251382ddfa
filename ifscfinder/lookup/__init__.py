"""Lookup domain - cached point lookups by IFSC code."""

from .service import LookupService

__all__ = [
    "LookupService",
]
