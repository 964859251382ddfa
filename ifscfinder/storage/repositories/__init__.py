"""
Repositories package for storage domain.

Provides read-only dataset access for IFSC lookups and search.
"""

from ifscfinder.storage.repositories.ifsc_repo import IfscRepository, StoreResult

__all__ = [
    "IfscRepository",
    "StoreResult",
]
