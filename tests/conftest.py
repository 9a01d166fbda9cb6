"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from jsonl2json.cli import cli

FOO_LINES = '{"foo": "bar"}\n{"foo": "baz"}'


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin.

    Usage:
        result = invoke(["--input", "in.jsonl"])
        result = invoke(["--pretty"], input_data='{"a": 1}\\n')
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def foo_jsonl(tmp_path):
    """Two-record JSONL file."""
    path = tmp_path / "foo.jsonl"
    path.write_text(FOO_LINES + "\n")
    return path


@pytest.fixture
def people_jsonl(tmp_path):
    """JSONL file with a few nested records."""
    path = tmp_path / "people.jsonl"
    path.write_text(
        '{"name": "Alice", "age": 30, "tags": ["admin", "dev"]}\n'
        '{"name": "Bob", "age": 25, "address": {"city": "NYC", "zip": null}}\n'
        '{"name": "Carol", "age": 41.5, "active": true}\n'
    )
    return path
