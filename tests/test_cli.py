"""
Tests for the command line interface.
"""

from unittest.mock import patch

from click.testing import CliRunner

from academia import __version__
from academia.cli import cli
from academia.config import Settings


class TestCli:
    """Tests for the academia CLI."""

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_schema_prints_sdl(self):
        result = CliRunner().invoke(cli, ["schema"])

        assert result.exit_code == 0
        assert "type Query" in result.output
        assert "updateStudentCGPA" in result.output

    def test_serve_runs_uvicorn(self, monkeypatch):
        # serve exports its flags; register them so they are restored afterwards
        monkeypatch.setenv("ACADEMIA_SEED_DEMO_DATA", "false")
        monkeypatch.setenv("ACADEMIA_LOG_LEVEL", "INFO")
        with patch("academia.cli.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve", "--port", "9001", "--seed"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        _, kwargs = mock_run.call_args
        assert kwargs["port"] == 9001
        assert kwargs["factory"] is True

    def test_serve_turns_debug_off_below_debug_level(self, monkeypatch):
        monkeypatch.setenv("ACADEMIA_SEED_DEMO_DATA", "false")
        monkeypatch.setenv("ACADEMIA_LOG_LEVEL", "INFO")
        monkeypatch.setenv("ACADEMIA_DEBUG", "true")
        monkeypatch.delenv("ACADEMIA_DEBUG")
        with patch("academia.cli.uvicorn.run"):
            result = CliRunner().invoke(cli, ["serve", "--log-level", "info"])

        assert result.exit_code == 0
        assert Settings().debug is False

    def test_serve_debug_level_enables_debug(self, monkeypatch):
        monkeypatch.setenv("ACADEMIA_LOG_LEVEL", "INFO")
        monkeypatch.setenv("ACADEMIA_DEBUG", "false")
        with patch("academia.cli.uvicorn.run"):
            result = CliRunner().invoke(cli, ["serve", "--log-level", "debug"])

        assert result.exit_code == 0
        assert Settings().debug is True
