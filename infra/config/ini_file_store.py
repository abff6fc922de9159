from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from domain.models import (
    CaseInsensitiveMap,
    ErrorKind,
    IniDocument,
    IniStoreOptions,
    StoreError,
)
from domain.ports import ClockPort, LoggerPort
from domain.services import ParseStats, ParseTimeoutError, parse_ini, render_ini
from infra.runtime import SystemClock

PathArg = Union[str, os.PathLike]


class IniFileStore:
    """Configuration store backed by a single INI file.

    Build instances with ``open_ini_store``. Accessors only touch the
    in-memory document; nothing reaches the disk until ``save()``.
    """

    def __init__(
        self,
        path: Path,
        document: IniDocument,
        *,
        options: IniStoreOptions,
        clock: ClockPort,
        logger: LoggerPort | None = None,
    ) -> None:
        self._path = path
        self._document = document
        self._options = options
        self._clock = clock
        self._logger = logger

    @property
    def path(self) -> Path:
        return self._path

    # -- accessors ----------------------------------------------------------

    def get_value(self, section: str, key: str, default: str = "") -> str:
        return self._document.get_value(section, key, default)

    def set_value(self, section: str, key: str, value: str | None) -> None:
        self._document.set_value(section, key, value)

    def get_section(self, section: str) -> CaseInsensitiveMap[str]:
        return self._document.get_section(section)

    def has_section(self, section: str) -> bool:
        return self._document.has_section(section)

    def has_key(self, section: str, key: str) -> bool:
        return self._document.has_key(section, key)

    def delete_key(self, section: str, key: str) -> bool:
        return self._document.delete_key(section, key)

    def delete_section(self, section: str) -> bool:
        return self._document.delete_section(section)

    def section_names(self) -> list[str]:
        return self._document.section_names()

    # -- persistence --------------------------------------------------------

    def reload(self) -> StoreError | None:
        """Re-read the file, discarding unsaved changes.

        On failure the current in-memory document is left untouched.
        """
        loaded = _load(self._path, self._options, self._clock, self._logger)
        if isinstance(loaded, StoreError):
            return loaded
        self._document = loaded
        return None

    def save(self) -> StoreError | None:
        try:
            text = render_ini(self._document, newline=self._options.newline)
            if self._options.create_parent_dirs:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" so the configured separator is written untranslated.
            with self._path.open("w", encoding=self._options.encoding, newline="") as fh:
                fh.write(text)
        except OSError as exc:
            return self._save_failed(f"Failed to save INI file '{self._path}'", exc)
        except Exception as exc:
            return self._save_failed(
                f"An unexpected error occurred while saving INI file '{self._path}'", exc,
            )

        if self._logger is not None:
            self._logger.info(
                "ini_store_saved",
                path=str(self._path),
                sections=len(self._document.section_names()),
                chars=len(text),
            )
        return None

    def _save_failed(self, message: str, exc: Exception) -> StoreError:
        if self._logger is not None:
            self._logger.error("ini_store_save_failed", path=str(self._path), error=str(exc))
        return StoreError(
            kind=ErrorKind.SAVE_FAILED,
            message=message,
            path=str(self._path),
            cause=exc,
        )


def open_ini_store(
    path: PathArg | None,
    *,
    options: IniStoreOptions | None = None,
    clock: ClockPort | None = None,
    logger: LoggerPort | None = None,
) -> IniFileStore | StoreError:
    """Open the INI file at ``path``.

    A missing file is not an error: the store starts with only the empty
    global section and the file is created by the first ``save()``.
    Read, decode and timeout failures come back as a ``StoreError`` with
    ``ErrorKind.LOAD_FAILED``.
    """
    raw = os.fspath(path) if path is not None else ""
    if not raw:
        return StoreError(
            kind=ErrorKind.INVALID_ARGUMENT,
            message="File path cannot be None or empty.",
        )

    file_path = Path(raw)
    options = options or IniStoreOptions()
    clock = clock or SystemClock()

    loaded = _load(file_path, options, clock, logger)
    if isinstance(loaded, StoreError):
        return loaded
    return IniFileStore(file_path, loaded, options=options, clock=clock, logger=logger)


def _load(
    path: Path,
    options: IniStoreOptions,
    clock: ClockPort,
    logger: LoggerPort | None,
) -> IniDocument | StoreError:
    stats: ParseStats | None = None
    try:
        with path.open("r", encoding=_read_encoding(options.encoding)) as fh:
            result = parse_ini(fh, clock=clock, timeout=options.parse_timeout)
        document, stats = result.document, result.stats
    except (FileNotFoundError, NotADirectoryError):
        document = IniDocument()
    except (OSError, UnicodeDecodeError, ParseTimeoutError) as exc:
        if logger is not None:
            logger.error("ini_store_load_failed", path=str(path), error=str(exc))
        return StoreError(
            kind=ErrorKind.LOAD_FAILED,
            message=f"Failed to load INI file '{path}'",
            path=str(path),
            cause=exc,
        )

    if logger is not None:
        logger.info(
            "ini_store_opened",
            path=str(path),
            created=stats is None,
            sections=len(document.section_names()),
            keys=document.key_count(),
            skipped_lines=stats.skipped_lines if stats is not None else 0,
        )
    return document


def _read_encoding(encoding: str) -> str:
    # Accept a leading byte-order mark on files written by other tools.
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        return "utf-8-sig"
    return encoding

