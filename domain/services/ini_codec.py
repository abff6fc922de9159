from __future__ import annotations

import io
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable

from domain.models import GLOBAL_SECTION, IniDocument
from domain.ports import ClockPort

# Both patterns are anchored and use negated character classes, so a match
# attempt is linear in the line length.
_SECTION_PATTERN = re.compile(r"^\s*\[([^\]]+)\]\s*$")
_ENTRY_PATTERN = re.compile(r"^([^=]+)=(.*)$")
_COMMENT_PREFIXES = (";", "#")


class ParseTimeoutError(TimeoutError):
    """A single line took longer than the parse timeout to match."""

    def __init__(self, timeout: timedelta, line_number: int) -> None:
        super().__init__(
            f"INI line {line_number} took longer than {timeout.total_seconds():g}s to parse"
        )
        self.timeout = timeout
        self.line_number = line_number


@dataclass(frozen=True)
class ParseStats:
    lines_read: int
    skipped_lines: int


@dataclass(frozen=True)
class ParseResult:
    document: IniDocument
    stats: ParseStats


def parse_ini(
    lines: Iterable[str],
    *,
    clock: ClockPort | None = None,
    timeout: timedelta | None = None,
) -> ParseResult:
    """Build an ``IniDocument`` from INI lines, in order.

    Blank lines and full-line ``;``/``#`` comments are ignored. Lines that
    are neither a ``[section]`` header nor a ``key=value`` entry are
    skipped and counted in ``ParseStats.skipped_lines``. When ``timeout``
    is given, matching a single line may take at most ``timeout`` as
    measured by ``clock``; a slower line raises ``ParseTimeoutError``.
    Reading the lines is not timed, so file size alone never fails a parse.
    """
    if timeout is not None and clock is None:
        raise ValueError("a clock is required when a parse timeout is set")

    document = IniDocument()
    entries = document.ensure_section(GLOBAL_SECTION)
    lines_read = 0
    skipped = 0

    for raw in lines:
        lines_read += 1
        line = raw.rstrip("\r\n")
        started = clock.now() if clock is not None and timeout is not None else None

        if line.strip() and not line.lstrip().startswith(_COMMENT_PREFIXES):
            header = _SECTION_PATTERN.match(line)
            if header is not None:
                entries = document.ensure_section(header.group(1).strip())
            else:
                entry = _ENTRY_PATTERN.match(line)
                if entry is not None:
                    entries[entry.group(1).strip()] = entry.group(2).strip()
                else:
                    skipped += 1

        if started is not None and clock is not None and timeout is not None:
            if clock.now() - started > timeout:
                raise ParseTimeoutError(timeout, lines_read)

    return ParseResult(
        document=document,
        stats=ParseStats(lines_read=lines_read, skipped_lines=skipped),
    )


def parse_ini_text(
    text: str,
    *,
    clock: ClockPort | None = None,
    timeout: timedelta | None = None,
) -> ParseResult:
    # newline=None splits on \n, \r and \r\n only, the same as reading a file.
    return parse_ini(io.StringIO(text, newline=None), clock=clock, timeout=timeout)


def render_ini(document: IniDocument, *, newline: str = "\n") -> str:
    """Serialize ``document`` to INI text.

    Global entries come first, followed by a blank line when other sections
    exist. Each named section is written as a header, its entries, and a
    trailing blank line. Entries with an empty key are dropped.
    """
    lines: list[str] = []
    named: list[tuple[str, Iterable[tuple[str, str]]]] = []

    for name, entries in document.iter_sections():
        if name == GLOBAL_SECTION:
            lines.extend(_entry_lines(entries.items()))
        else:
            named.append((name, entries.items()))

    if lines and named:
        lines.append("")

    for name, items in named:
        lines.append(f"[{name}]")
        lines.extend(_entry_lines(items))
        lines.append("")

    return "".join(line + newline for line in lines)


def _entry_lines(items: Iterable[tuple[str, str]]) -> list[str]:
    return [f"{key}={value}" for key, value in items if key]
