from __future__ import annotations

import shutil
import sys

import pytest
from pydantic import ValidationError

from markdown_marker.errors import FormatError
from markdown_marker.formatters import (
    CodeFormatterRegistry,
    CommandFormatter,
    FormatterRegistration,
    JsonFormatter,
    gofmt_registration,
    json_registration,
)


def test_registry_lookup_is_exact(upper_formatter) -> None:
    registry = CodeFormatterRegistry()
    registry.register(["go"], upper_formatter)

    assert registry.lookup("go") is upper_formatter
    assert registry.lookup("Go") is None
    assert registry.lookup(None) is None
    assert registry.lookup("") is None
    assert "go" in registry
    assert len(registry) == 1


def test_registry_last_registration_wins(upper_formatter) -> None:
    json_formatter = JsonFormatter()
    registry = CodeFormatterRegistry.from_registrations(
        [
            FormatterRegistration(languages=frozenset({"json"}), formatter=upper_formatter),
            FormatterRegistration(languages=frozenset({"json"}), formatter=json_formatter),
        ]
    )

    assert registry.lookup("json") is json_formatter


def test_gofmt_registration_claims_both_go_tags() -> None:
    registry = CodeFormatterRegistry.from_registrations([gofmt_registration()])

    assert registry.languages() == ["go", "golang"]


def test_registration_requires_a_formatter() -> None:
    with pytest.raises(ValidationError):
        FormatterRegistration(languages=frozenset({"go"}), formatter=object())


def test_registration_requires_languages(upper_formatter) -> None:
    with pytest.raises(ValidationError):
        FormatterRegistration(languages=frozenset(), formatter=upper_formatter)


def test_json_formatter_reindents() -> None:
    assert JsonFormatter().format('{"a":1,"b":[1,2]}') == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}\n'


def test_json_formatter_keeps_non_ascii() -> None:
    assert JsonFormatter(indent=0).format('{"k": "é"}') == '{\n"k": "é"\n}\n'


def test_json_formatter_rejects_malformed_input() -> None:
    with pytest.raises(FormatError) as excinfo:
        json_registration().formatter.format("{not json")

    assert excinfo.value.language == "json"


def test_command_formatter_pipes_through_executable() -> None:
    formatter = CommandFormatter(
        command=(sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"),
    )

    assert formatter.format("package main\n") == "PACKAGE MAIN\n"


def test_command_formatter_reports_non_zero_exit() -> None:
    formatter = CommandFormatter(
        command=(sys.executable, "-c", "import sys; sys.stderr.write('bad input'); sys.exit(2)"),
        language="go",
    )

    with pytest.raises(FormatError) as excinfo:
        formatter.format("x")

    assert excinfo.value.stderr == "bad input"
    assert "bad input" in str(excinfo.value)


def test_command_formatter_reports_missing_executable() -> None:
    formatter = CommandFormatter(command=("markdown-marker-no-such-tool",), language="go")

    with pytest.raises(FormatError) as excinfo:
        formatter.format("x")

    assert excinfo.value.command == ("markdown-marker-no-such-tool",)


@pytest.mark.skipif(shutil.which("gofmt") is None, reason="gofmt is not installed")
def test_gofmt_formats_go_source() -> None:
    formatter = gofmt_registration().formatter

    assert formatter.format("package main\nfunc main(){}\n") == "package main\n\nfunc main() {}\n"


@pytest.mark.skipif(shutil.which("gofmt") is None, reason="gofmt is not installed")
def test_gofmt_rejects_malformed_go() -> None:
    with pytest.raises(FormatError):
        gofmt_registration().formatter.format("func {")
