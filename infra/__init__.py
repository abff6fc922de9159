"""Infrastructure adapters – concrete implementations of domain ports."""

from .config import IniFileStore, open_ini_store
from .runtime import StructuredLogger, SystemClock

__all__ = [
    "IniFileStore",
    "open_ini_store",
    "SystemClock",
    "StructuredLogger",
]
