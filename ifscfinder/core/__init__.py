"""Core domain - configuration and code normalization."""

from ifscfinder.core.config import Settings, get_settings
from ifscfinder.core.normalize import IFSC_LENGTH, normalize, normalize_ifsc_code

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Normalization
    "IFSC_LENGTH",
    "normalize",
    "normalize_ifsc_code",
]
