from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

import pytest

from test.fixtures import ini_fixture


@pytest.fixture()
def copy_ini(tmp_path: Path) -> Callable[[str], Path]:
    """Copy an INI file from test/fixtures/ini into ``tmp_path``."""

    def _copy(name: str) -> Path:
        target = tmp_path / name
        shutil.copyfile(ini_fixture(name), target)
        return target

    return _copy
