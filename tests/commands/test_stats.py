"""Tests for the length, sum, average, and weighted-average commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from safelist.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestLengthCommand:
    def test_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "length", "3", "1", "4"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"] == {"length": 3, "not_empty": True}

    def test_length_of_nothing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "length"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0"

    def test_rejects_non_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["length", "x"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_dir")
class TestSumCommand:
    def test_sum(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sum", "1", "2", "3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "6"

    def test_negative_values_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sum", "--", "-4", "10"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "6"

    def test_empty_sum_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sum"])
        assert result.exit_code == 1
        assert "Cannot sum an empty list" in result.output

    def test_empty_sum_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "sum"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "EMPTY_LIST_SUM"


@pytest.mark.usefixtures("_isolated_dir")
class TestAverageCommand:
    def test_average(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["average", "4", "6"])
        assert result.exit_code == 0
        assert "OK average" in result.stdout
        assert "average: 5" in result.stdout

    def test_average_empty_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "average"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "PRECONDITION_VIOLATION"

    def test_or_nothing_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "average", "--or-nothing"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["average"] is None
        assert data["warnings"] == ["Empty input: no average"]

    def test_or_nothing_warning_goes_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["average", "--or-nothing"])
        assert result.exit_code == 0
        assert "WARNING: Empty input: no average" in result.output
        assert "WARNING" not in result.stdout

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--json", "average", "1", "2"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["meta"]["telemetry"]["name"] == "ListService.average"


@pytest.mark.usefixtures("_isolated_dir")
class TestWeightedAverageCommand:
    def test_example(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "weighted-average", "2:10", "3:20"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "16"

    def test_non_positive_weight(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "weighted-average", "0:10"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_POSITIVE"

    def test_separator_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "safelist.toml").write_text('[weighted]\npair_separator = "/"\n')
        result = cli_runner.invoke(cli, ["-q", "weighted-average", "2/10", "3/20"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "16"

    def test_examples_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["weighted-average", "--examples"])
        assert result.exit_code == 0
        assert "safelist weighted-average 2:10 3:20" in result.output

    def test_negative_pair_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "weighted-average", "--", "-1:5"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_POSITIVE"

    def test_examples_show_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["weighted-average", "--examples"])
        assert "safelist weighted-average -- -1:5" in result.output
