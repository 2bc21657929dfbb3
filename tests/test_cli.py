"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from md2xk6 import __version__
from md2xk6.cli import app

runner = CliRunner()

MODULE_LIST = """
# Extensions

- [a](https://github.com/foo/bar)
- [b](https://gitlab.com/baz/qux/releases/tag/v1.2.3)
"""


def test_prints_with_flags(write_markdown: Callable[..., Path]) -> None:
    path = write_markdown(MODULE_LIST, name="extensions.md")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert result.stdout == " --with github.com/foo/bar --with gitlab.com/baz/qux@v1.2.3"


def test_defaults_to_readme_in_working_directory(
    write_markdown: Callable[..., Path],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_markdown(MODULE_LIST)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout == " --with github.com/foo/bar --with gitlab.com/baz/qux@v1.2.3"


def test_no_modules_prints_nothing(write_markdown: Callable[..., Path]) -> None:
    path = write_markdown("# Nothing here\n")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_missing_file_exits_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.md")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_json_format(write_markdown: Callable[..., Path]) -> None:
    path = write_markdown(MODULE_LIST)

    result = runner.invoke(app, ["--format", "json", str(path)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["github.com/foo/bar", "gitlab.com/baz/qux@v1.2.3"]


def test_format_from_environment(write_markdown: Callable[..., Path]) -> None:
    path = write_markdown(MODULE_LIST)

    result = runner.invoke(app, [str(path)], env={"MD2XK6_FORMAT": "lines"})

    assert result.exit_code == 0
    assert result.stdout == "github.com/foo/bar\ngitlab.com/baz/qux@v1.2.3\n"


def test_reads_standard_input() -> None:
    result = runner.invoke(app, ["-"], input="- <https://github.com/foo/bar>\n")

    assert result.exit_code == 0
    assert result.stdout == " --with github.com/foo/bar"


def test_verbose_run_succeeds(write_markdown: Callable[..., Path]) -> None:
    path = write_markdown(MODULE_LIST)

    result = runner.invoke(app, ["--verbose", str(path)])

    assert result.exit_code == 0
    assert "github.com/foo/bar" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_with_flag_from_environment(write_markdown: Callable[..., Path]) -> None:
    path = write_markdown(MODULE_LIST)

    result = runner.invoke(app, [str(path)], env={"MD2XK6_WITH_FLAG": "-w"})

    assert result.exit_code == 0
    assert result.stdout == " -w github.com/foo/bar -w gitlab.com/baz/qux@v1.2.3"
