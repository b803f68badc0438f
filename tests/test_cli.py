import json

from click.testing import CliRunner

from tenpin.cli import cli


def test_help_without_command():
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0
    assert "score" in result.output
    assert "selftest" in result.output


def test_score_json():
    result = CliRunner().invoke(cli, ["score", "--json", "1", "/", "5", "3"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [15, 8]


def test_score_json_incomplete():
    result = CliRunner().invoke(cli, ["score", "--json", "1", "2", "X", "3"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [3, None, None]


def test_score_table():
    result = CliRunner().invoke(cli, ["score", "X", "X", "X"])
    assert result.exit_code == 0
    score_row = result.output.splitlines()[3]
    assert [c.strip() for c in score_row.split("|")[1:-1]][:3] == ["30", "", ""]


def test_score_invalid():
    result = CliRunner().invoke(cli, ["score", "1", "X"])
    assert result.exit_code == 1
    assert "Encountered a X in an unexpected spot" in result.output


def test_score_malformed():
    result = CliRunner().invoke(cli, ["score", "3", "/", "11"])
    assert result.exit_code == 1
    assert "Malformed roll: '11'" in result.output


def test_selftest():
    result = CliRunner().invoke(cli, ["selftest"])
    assert result.exit_code == 0
    assert "passed: False" not in result.output
