"""Reporter output tests."""

from __future__ import annotations

import io
import json

from md2xk6.config import ExtractConfig, OutputFormat
from md2xk6.reporters import ArgsReporter, JsonReporter, LinesReporter, get_reporter

MODULES = ["github.com/foo/bar", "gitlab.com/baz/qux@v1.2.3"]


def test_args_reporter_concatenates_without_newline() -> None:
    output = io.StringIO()
    ArgsReporter(output).report(MODULES)
    assert output.getvalue() == " --with github.com/foo/bar --with gitlab.com/baz/qux@v1.2.3"


def test_args_reporter_prints_nothing_for_empty_list() -> None:
    output = io.StringIO()
    ArgsReporter(output).report([])
    assert output.getvalue() == ""


def test_args_reporter_custom_flag() -> None:
    output = io.StringIO()
    ArgsReporter(output, flag="-w").report(["github.com/foo/bar"])
    assert output.getvalue() == " -w github.com/foo/bar"


def test_lines_reporter() -> None:
    output = io.StringIO()
    LinesReporter(output).report(MODULES)
    assert output.getvalue() == "github.com/foo/bar\ngitlab.com/baz/qux@v1.2.3\n"


def test_json_reporter() -> None:
    output = io.StringIO()
    JsonReporter(output).report(MODULES)
    assert json.loads(output.getvalue()) == MODULES


def test_get_reporter_by_format() -> None:
    assert isinstance(get_reporter(OutputFormat.ARGS), ArgsReporter)
    assert isinstance(get_reporter(OutputFormat.LINES), LinesReporter)
    assert isinstance(get_reporter(OutputFormat.JSON), JsonReporter)


def test_get_reporter_passes_with_flag() -> None:
    reporter = get_reporter(OutputFormat.ARGS, "-w")
    assert isinstance(reporter, ArgsReporter)
    assert reporter.flag == "-w"


def test_config_default_flag_is_with() -> None:
    assert ExtractConfig().with_flag == "--with"
