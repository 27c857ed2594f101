"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from reflectctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["daily", "--help"], ["get", "create", "update", "list"]),
    (["daily", "create", "--help"], ["--date", "--energy", "--win", "--rating", "--from-json"]),
    (["daily", "update", "--help"], ["DATE", "--friction-action"]),
    (["weekly", "--help"], ["get", "create", "update", "list"]),
    (["weekly", "create", "--help"], ["--week", "--moved-needle", "--adjustment"]),
    (["reviews", "list", "--help"], ["--type", "--sort"]),
    (["goals", "--help"], ["snapshot", "get", "save", "draft"]),
    (["goals", "save", "--help"], ["TIMEFRAME", "--file", "1-year"]),
    (["goals", "draft", "--help"], ["get", "save", "clear"]),
    (["framework", "--help"], ["get", "save"]),
    (["framework", "get", "--help"], ["NAME", "vivid-vision"]),
    (["life-map", "--help"], ["get", "set"]),
    (["life-map", "set", "--help"], ["--score", "--assess", "--from-json", "clamped"]),
    (["doc", "--help"], ["get", "save"]),
    (["doc", "save", "--help"], ["NAME", "north-star", "--file"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["daily", "--examples"], ["reflectctl daily create"]),
    (["daily", "create", "--examples"], ["--from-json review.json"]),
    (["weekly", "--examples"], ["reflectctl weekly create"]),
    (["reviews", "list", "--examples"], ["--type weekly"]),
    (["goals", "--examples"], ["reflectctl goals draft save"]),
    (["goals", "draft", "--examples"], ["reflectctl goals draft clear"]),
    (["framework", "--examples"], ["reflectctl framework get vivid-vision"]),
    (["life-map", "--examples"], ["reflectctl life-map set --score career=8"]),
    (["doc", "--examples"], ["reflectctl doc save memory"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
