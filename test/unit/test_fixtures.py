from __future__ import annotations

import pytest

from test.fixtures import ini_fixture


@pytest.mark.parametrize(
    "name",
    ["basic.ini", "bom_crlf.ini", "comments_only.ini", "duplicates.ini", "malformed.ini"],
)
def test_ini_fixture_exists_and_is_not_empty(name: str) -> None:
    path = ini_fixture(name)
    assert path.is_file()
    assert path.stat().st_size > 0


def test_bom_fixture_starts_with_byte_order_mark() -> None:
    raw = ini_fixture("bom_crlf.ini").read_bytes()
    assert raw.startswith(b"\xef\xbb\xbf")
    assert b"\r\n" in raw
