"""
Domain layer package.

This package contains the INI document model, its error taxonomy and the
ports that infrastructure adapters implement.
"""

from .models import (  # noqa: F401
    GLOBAL_SECTION,
    CaseInsensitiveMap,
    ErrorKind,
    IniDocument,
    IniStoreOptions,
    InvalidArgumentError,
    StoreError,
)
from .ports import (  # noqa: F401
    ClockPort,
    LoggerPort,
)

__all__ = [
    # Models
    "GLOBAL_SECTION",
    "CaseInsensitiveMap",
    "IniDocument",
    "IniStoreOptions",
    "ErrorKind",
    "StoreError",
    "InvalidArgumentError",
    # Ports
    "ClockPort",
    "LoggerPort",
]
