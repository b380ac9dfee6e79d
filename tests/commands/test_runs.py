"""Tests for the group and stutter commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from safelist.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestGroupCommand:
    def test_group_chars(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "group", "aaabccdd"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["groups"] == ["aaa", "b", "cc", "dd"]

    def test_group_words_ignore_case(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "group", "--words", "--ignore-case", "Go go stop"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Go go", "stop"]

    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["group", "--help"])
        assert result.exit_code == 0
        assert "TEXT" in result.output


@pytest.mark.usefixtures("_isolated_dir")
class TestStutterCommand:
    def test_sentence(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "stutter", "ssstringssss liiiiiike thisss"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "strings like this"

    def test_words(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "stutter", "--words", "go go go now"])
        assert result.stdout.strip() == "go now"

    def test_config_enables_ignore_case(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "safelist.toml").write_text("[grouping]\nignore_case = true\n")
        result = cli_runner.invoke(cli, ["-q", "stutter", "AaaB"])
        assert result.stdout.strip() == "AB"

    def test_explicit_config_option(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "conf" / "custom.toml"
        config.parent.mkdir()
        config.write_text("[grouping]\nsplit_words = true\n")
        result = cli_runner.invoke(cli, ["-c", str(config), "-q", "stutter", "hi hi there"])
        assert result.stdout.strip() == "hi there"

    def test_match_case_overrides_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "safelist.toml").write_text("[grouping]\nignore_case = true\n")
        result = cli_runner.invoke(cli, ["-q", "stutter", "--match-case", "Aa"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Aa"

    def test_chars_overrides_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "safelist.toml").write_text("[grouping]\nsplit_words = true\n")
        result = cli_runner.invoke(cli, ["--json", "group", "--chars", "aab"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["groups"] == ["aa", "b"]

    def test_examples_list_negated_flags(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stutter", "--examples"])
        assert result.exit_code == 0
        assert "--match-case" in result.stdout
