"""Tests for CLI main module."""

import pytest
from unittest.mock import MagicMock, patch

import typer
from typer.testing import CliRunner

from quadforge.cli.main import _run_cli_command, app
from quadforge.errors import InvalidResourceName


runner = CliRunner()


@patch("quadforge.cli.main.ProjectLoader")
@patch("quadforge.cli.main.console")
def test_run_cli_command_success(mock_console, mock_loader):
    """Test the CLI command runner on a successful execution."""
    mock_handler = MagicMock()

    _run_cli_command(mock_handler, "project.yaml", kind="pod")

    mock_loader.assert_called_once_with("project.yaml")
    mock_handler.assert_called_once_with(
        mock_loader.return_value.build.return_value, kind="pod"
    )
    mock_console.print.assert_not_called()


@patch("quadforge.cli.main.ProjectLoader")
@patch("quadforge.cli.main.console")
def test_run_cli_command_resource_error(mock_console, mock_loader):
    """Test the CLI command runner when a resource error is raised."""
    mock_loader.return_value.build.side_effect = InvalidResourceName("network", "dmz")
    mock_handler = MagicMock()

    with pytest.raises(typer.Exit) as exc_info:
        _run_cli_command(mock_handler, "project.yaml")

    mock_handler.assert_not_called()
    mock_console.print.assert_called_once_with(
        '[red]Error:[/red] invalid_resource_name: Network "dmz" not found'
    )
    assert exc_info.value.exit_code == 1


@patch("quadforge.cli.main.ProjectLoader")
@patch("quadforge.cli.main.console")
def test_run_cli_command_escapes_markup(mock_console, mock_loader):
    """Test that brackets in messages are not read as markup."""
    mock_loader.return_value.build.side_effect = ValueError("bad [value]")

    with pytest.raises(typer.Exit):
        _run_cli_command(MagicMock(), "project.yaml")

    mock_console.print.assert_called_once_with("[red]Error:[/red] bad \\[value]")


class TestCommands:
    """Test commands end to end."""

    def test_validate(self, project_file):
        result = runner.invoke(app, ["validate", str(project_file)])

        assert result.exit_code == 0
        assert "Project is valid" in result.output

    def test_validate_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Project file not found" in result.output

    def test_list(self, project_file):
        result = runner.invoke(app, ["list", str(project_file)])

        assert result.exit_code == 0
        assert "wordpress" in result.output
        assert "caddy-config" in result.output

    def test_list_kind(self, project_file):
        result = runner.invoke(app, ["list", str(project_file), "--kind", "network"])

        assert result.exit_code == 0
        assert "10.89.0.0/24" in result.output
        assert "wordpress" not in result.output

    def test_list_unknown_kind(self, project_file):
        result = runner.invoke(app, ["list", str(project_file), "--kind", "service"])

        assert result.exit_code != 0

    def test_render_user(self, project_file):
        result = runner.invoke(app, ["render", str(project_file), "--user", "bob"])

        assert result.exit_code == 0
        assert "/home/bob/.config/containers/systemd/caddy.container" in result.output
        assert "ContainerName=caddy" in result.output
        assert "wordpress" not in result.output

    def test_render_kind(self, project_file):
        result = runner.invoke(app, ["render", str(project_file), "-u", "alice", "-k", "socket"])

        assert result.exit_code == 0
        assert "ListenStream=[::]443" in result.output
        assert "PodName" not in result.output

    def test_render_unknown_user(self, project_file):
        result = runner.invoke(app, ["render", str(project_file), "--user", "carol"])

        assert result.exit_code == 0
        assert "No files configured for user carol" in result.output

    def test_log_level_option(self, project_file):
        result = runner.invoke(app, ["--log-level", "DEBUG", "validate", str(project_file)])

        assert result.exit_code == 0
