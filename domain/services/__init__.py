"""
Domain services.

Pure INI parsing and serialization over ``IniDocument``; file access and
error translation live in the infrastructure layer.
"""

from .ini_codec import (  # noqa: F401
    ParseResult,
    ParseStats,
    ParseTimeoutError,
    parse_ini,
    parse_ini_text,
    render_ini,
)

__all__ = [
    "ParseResult",
    "ParseStats",
    "ParseTimeoutError",
    "parse_ini",
    "parse_ini_text",
    "render_ini",
]
