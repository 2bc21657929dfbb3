from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_markdown(tmp_path: Path) -> Callable[..., Path]:
    """Write dedented markdown into tmp_path and return the file path."""

    def _write(content: str, name: str = "README.md") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
