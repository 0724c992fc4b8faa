"""CLI smoke tests."""

from click.testing import CliRunner
from metaform_scaffold.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "generate" in result.output
    assert "--verbose" in result.output
