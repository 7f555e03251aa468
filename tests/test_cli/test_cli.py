"""Tests for the objkit CLI commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from objkit import __version__
from objkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector building" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        for name in ("selector", "combine", "area", "rectangle", "reformat"):
            assert name in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_builds_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["selector", "element:a", 'attr:href$=".png"', "pseudo-class:focus"]
        )
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_value_may_contain_colon(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "pseudo-class:not(:first-child)"])
        assert result.exit_code == 0
        assert result.output.strip() == ":not(:first-child)"

    def test_out_of_order(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "class:main", "id:x"])
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged" in result.output

    def test_duplicate(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "id:a", "id:b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "tag:div"])
        assert result.exit_code == 1
        assert "expected KIND:VALUE" in result.output

    def test_missing_separator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "div"])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_child(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "nav", ">", "a"])
        assert result.exit_code == 0
        assert result.output == "nav > a\n"

    def test_descendant(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "ul", " ", "li"])
        assert result.exit_code == 0
        assert result.output == "ul   li\n"

    def test_invalid_combinator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "a", "|", "b"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# area / rectangle commands
# ---------------------------------------------------------------------------


class TestRectangleCommands:
    def test_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output == "200\n"

    def test_area_fractional(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "2.5", "3"])
        assert result.output == "7.5\n"

    def test_rectangle_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert result.output == '{"width":10,"height":20}\n'

    def test_rectangle_indent(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--indent", "2", "rectangle", "1", "2"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"width": 1, "height": 2}
        assert '\n  "width": 1' in result.output


# ---------------------------------------------------------------------------
# reformat command
# ---------------------------------------------------------------------------


class TestReformatCommand:
    def test_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["reformat"], input='{ "b": 1,\n "a": [1, 2] }')
        assert result.exit_code == 0
        assert result.output == '{"b":1,"a":[1,2]}\n'

    def test_file(self, tmp_path) -> None:
        path = tmp_path / "doc.json"
        path.write_text('[true, null, "x"]', encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["reformat", str(path)])
        assert result.exit_code == 0
        assert result.output == '[true,null,"x"]\n'

    def test_invalid_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["reformat"], input="{not json")
        assert result.exit_code == 1
        assert "Error: invalid JSON" in result.output
