from __future__ import annotations

import codecs
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Iterable, Iterator, Mapping, MutableMapping, TypeVar

V = TypeVar("V")

GLOBAL_SECTION = ""


class ErrorKind(str, Enum):
    """Failure categories reported by the INI store."""

    INVALID_ARGUMENT = "invalid_argument"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"


@dataclass(frozen=True)
class StoreError:
    """
    Explicit error value returned by store operations that touch the disk.

    ``cause`` keeps the underlying exception (``OSError``, decode error,
    parse timeout) so callers can inspect it without the store re-raising.
    """

    kind: ErrorKind
    message: str
    path: str | None = None
    cause: BaseException | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class InvalidArgumentError(ValueError):
    """Raised when ``None`` is passed where a section, key or path is required."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument
        self.error = StoreError(kind=ErrorKind.INVALID_ARGUMENT, message=str(self))


@dataclass(frozen=True)
class IniStoreOptions:
    """Tunables for loading and saving INI files."""

    parse_timeout: timedelta | None = timedelta(seconds=2)
    encoding: str = "utf-8"
    newline: str = "\n"
    create_parent_dirs: bool = True

    def __post_init__(self) -> None:
        if self.parse_timeout is not None and self.parse_timeout <= timedelta(0):
            raise ValueError("parse_timeout must be positive or None")
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {self.encoding}") from exc
        if not self.newline:
            raise ValueError("newline must not be empty")


class CaseInsensitiveMap(MutableMapping[str, V]):
    """
    Ordered mapping with case-insensitive string keys.

    Entries are stored under the lower-cased key together with the first
    spelling that was inserted, so lookups ignore case while iteration
    yields the original display form in insertion order.
    """

    def __init__(self, data: Mapping[str, V] | Iterable[tuple[str, V]] | None = None) -> None:
        self._entries: dict[str, tuple[str, V]] = {}
        if data is not None:
            self.update(data)

    @staticmethod
    def _fold(key: str) -> str:
        return key.lower()

    def __getitem__(self, key: str) -> V:
        return self._entries[self._fold(key)][1]

    def __setitem__(self, key: str, value: V) -> None:
        folded = self._fold(key)
        existing = self._entries.get(folded)
        display = existing[0] if existing is not None else key
        self._entries[folded] = (display, value)

    def __delitem__(self, key: str) -> None:
        del self._entries[self._fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return (display for display, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def clear(self) -> None:
        self._entries.clear()

    def copy(self) -> "CaseInsensitiveMap[V]":
        clone: CaseInsensitiveMap[V] = CaseInsensitiveMap()
        clone._entries = dict(self._entries)
        return clone


def _require(**arguments: object) -> None:
    for name, value in arguments.items():
        if value is None:
            raise InvalidArgumentError(name)


class IniDocument:
    """
    In-memory INI model: sections of string key/value pairs.

    The global section (empty name) is created up front and is never
    removed, only cleared.
    """

    def __init__(self) -> None:
        self._sections: CaseInsensitiveMap[CaseInsensitiveMap[str]] = CaseInsensitiveMap()
        self._sections[GLOBAL_SECTION] = CaseInsensitiveMap()

    def ensure_section(self, section: str) -> CaseInsensitiveMap[str]:
        _require(section=section)
        entries = self._sections.get(section)
        if entries is None:
            entries = CaseInsensitiveMap()
            self._sections[section] = entries
        return entries

    def get_value(self, section: str, key: str, default: str = "") -> str:
        _require(section=section, key=key)
        entries = self._sections.get(section)
        if entries is None or key not in entries:
            return default
        return entries[key]

    def set_value(self, section: str, key: str, value: str | None) -> None:
        _require(section=section, key=key)
        self.ensure_section(section)[key] = "" if value is None else value

    def get_section(self, section: str) -> CaseInsensitiveMap[str]:
        _require(section=section)
        entries = self._sections.get(section)
        return entries.copy() if entries is not None else CaseInsensitiveMap()

    def has_section(self, section: str) -> bool:
        _require(section=section)
        return section in self._sections

    def has_key(self, section: str, key: str) -> bool:
        _require(section=section, key=key)
        entries = self._sections.get(section)
        return entries is not None and key in entries

    def delete_key(self, section: str, key: str) -> bool:
        _require(section=section, key=key)
        entries = self._sections.get(section)
        if entries is None or key not in entries:
            return False
        del entries[key]
        return True

    def delete_section(self, section: str) -> bool:
        _require(section=section)
        if section == GLOBAL_SECTION:
            self._sections[GLOBAL_SECTION].clear()
            return True
        if section not in self._sections:
            return False
        del self._sections[section]
        return True

    def section_names(self) -> list[str]:
        return list(self._sections)

    def iter_sections(self) -> Iterator[tuple[str, Mapping[str, str]]]:
        """Yield ``(name, entries)`` pairs, global section first."""
        return iter(self._sections.items())

    def key_count(self) -> int:
        return sum(len(entries) for entries in self._sections.values())


__all__ = [
    "GLOBAL_SECTION",
    "ErrorKind",
    "StoreError",
    "InvalidArgumentError",
    "IniStoreOptions",
    "CaseInsensitiveMap",
    "IniDocument",
]
