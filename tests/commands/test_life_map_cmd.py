"""Tests for the life-map command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from reflectctl.cli import cli
from tests.conftest import write_doc

LIFE_MAP = """\
# Life Map

| Domain | Score (1-10) | Brief Assessment |
|--------|--------------|------------------|
| Career | 8 | Strong momentum |
| Relationships | 6 | Needs more time |
| Health | 5 | Neglected |
| Meaning | 7 | Growing |
| Finances | 8 | Stable |
| Fun | 4 | Rare |
"""


@pytest.mark.usefixtures("_isolated_root")
class TestLifeMapGet:
    def test_get_json(self, cli_runner: CliRunner, data_root: Path) -> None:
        write_doc(data_root, "frameworks/life_map.md", LIFE_MAP)
        result = cli_runner.invoke(cli, ["--json", "life-map", "get"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["domains"]["meaning"] == {"score": 7, "assessment": "Growing"}
        assert [point["domain"] for point in data["chartData"]] == [
            "Career",
            "Relationships",
            "Health",
            "Meaning",
            "Finances",
            "Fun",
        ]

    def test_get_human(self, cli_runner: CliRunner, data_root: Path) -> None:
        write_doc(data_root, "frameworks/life_map.md", LIFE_MAP)
        result = cli_runner.invoke(cli, ["life-map", "get"])
        assert result.exit_code == 0
        assert "Strong momentum" in result.output
        assert "Total: 38 / 60" in result.output

    def test_get_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "life-map", "get"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"


@pytest.mark.usefixtures("_isolated_root")
class TestLifeMapSet:
    def test_scores_and_assessments(self, cli_runner: CliRunner, data_root: Path) -> None:
        write_doc(data_root, "frameworks/life_map.md", LIFE_MAP)
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "life-map",
                "set",
                "--score",
                "career=9",
                "--score",
                "Fun=12",
                "--assess",
                "fun=Booked a trip = finally",
            ],
        )
        assert result.exit_code == 0, result.output
        domains = json.loads(result.output)["data"]["domains"]
        assert domains["career"] == {"score": 9, "assessment": "Strong momentum"}
        assert domains["fun"] == {"score": 10, "assessment": "Booked a trip = finally"}
        written = (data_root / "frameworks" / "life_map.md").read_text()
        assert "| Fun | 10 | Booked a trip = finally |" in written
        assert "| Health | 5 | Neglected |" in written

    def test_from_json_with_override(
        self, cli_runner: CliRunner, data_root: Path, tmp_path: Path
    ) -> None:
        write_doc(data_root, "frameworks/life_map.md", LIFE_MAP)
        payload = tmp_path / "scores.json"
        payload.write_text(
            json.dumps({"domains": {"health": {"score": 3, "assessment": "Sick week"}}})
        )
        result = cli_runner.invoke(
            cli,
            ["--json", "life-map", "set", "--from-json", str(payload), "--score", "health=6"],
        )
        assert result.exit_code == 0, result.output
        health = json.loads(result.output)["data"]["domains"]["health"]
        assert health == {"score": 6, "assessment": "Sick week"}

    def test_decimal_score_truncated(self, cli_runner: CliRunner, data_root: Path) -> None:
        write_doc(data_root, "frameworks/life_map.md", LIFE_MAP)
        result = cli_runner.invoke(cli, ["--json", "life-map", "set", "--score", "meaning=7.9"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["domains"]["meaning"]["score"] == 7

    def test_human_output(self, cli_runner: CliRunner, data_root: Path) -> None:
        result = cli_runner.invoke(cli, ["life-map", "set", "--score", "career=5"])
        assert result.exit_code == 0, result.output
        assert "update_life_map" in result.output
        assert "frameworks/life_map.md" in result.output
        assert (data_root / "frameworks" / "life_map.md").is_file()

    @pytest.mark.parametrize(
        "args",
        [
            ["--score", "wealth=5"],
            ["--score", "career"],
            ["--score", "career=high"],
            ["--assess", "hobbies=Golf"],
        ],
    )
    def test_bad_option(self, cli_runner: CliRunner, data_root: Path, args: list[str]) -> None:
        result = cli_runner.invoke(cli, ["life-map", "set", *args])
        assert result.exit_code == 2
        assert not (data_root / "frameworks" / "life_map.md").exists()

    def test_nothing_to_update(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["life-map", "set"])
        assert result.exit_code == 2
        assert "Nothing to update" in result.output

    def test_invalid_json_score(
        self, cli_runner: CliRunner, data_root: Path, tmp_path: Path
    ) -> None:
        write_doc(data_root, "frameworks/life_map.md", LIFE_MAP)
        payload = tmp_path / "scores.json"
        payload.write_text('{"domains": {"career": {"score": "9"}}}')
        result = cli_runner.invoke(cli, ["--json", "life-map", "set", "--from-json", str(payload)])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "VALIDATION_ERROR"
        assert (data_root / "frameworks" / "life_map.md").read_text() == LIFE_MAP
