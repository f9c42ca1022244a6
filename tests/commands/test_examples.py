"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from vecmin.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["sample", "--examples"], ["vecmin sample", "--value 3"]),
    (["read", "--examples"], ["vecmin read numbers.txt", "vecmin -q read"]),
]


@pytest.mark.parametrize(
    "args,keywords",
    EXAMPLES_COMMANDS,
    ids=[args[0] for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_skips_command_body(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["read", "--examples"], input="1\n")
    assert "The number is" not in result.output


def test_examples_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["sample", "--help"])
    assert "--examples" in result.output
