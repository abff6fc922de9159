"""INI file adapter for the domain configuration model."""

from .ini_file_store import IniFileStore, open_ini_store

__all__ = ["IniFileStore", "open_ini_store"]
