"""Tests for the click entry point."""

import pytest
from click.testing import CliRunner

from chip_cli import cli as cli_module
from chip_cli.cli import main


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Leave the root logger alone while tests run."""
    monkeypatch.setattr(cli_module, "setup_logging", lambda level: None)


@pytest.fixture()
def base_args(tmp_path, data_file):
    return ["--config", str(tmp_path / "config.yaml"), "--data-file", str(data_file)]


class TestCli:
    """Test the chip command."""

    def test_ask_adds_task(self, base_args, data_file):
        runner = CliRunner()

        result = runner.invoke(main, base_args + ["ask", "todo", "Read", "a", "book"])

        assert result.exit_code == 0
        assert "Got it. I've added this task:" in result.output
        assert data_file.read_text(encoding="utf-8") == "T | 0 | Read a book\n"

    def test_ask_deadline_display(self, base_args):
        runner = CliRunner()

        result = runner.invoke(
            main, base_args + ["ask", "deadline Submit report /by 2024-12-31 1800"]
        )

        assert "by: Dec 31 2024, 6:00PM" in result.output

    def test_ask_reports_errors(self, base_args):
        runner = CliRunner()

        result = runner.invoke(main, base_args + ["ask", "mark"])

        assert result.exit_code == 0
        assert "OOPS!!! Please specify which task to mark." in result.output

    def test_ask_bye(self, base_args, data_file):
        runner = CliRunner()

        result = runner.invoke(main, base_args + ["ask", "bye"])

        assert result.output.strip() == "Bye. Hope to see you again soon!"
        assert not data_file.exists()

    def test_default_is_interactive_chat(self, base_args, data_file):
        runner = CliRunner()

        result = runner.invoke(main, base_args, input="todo Read a book\nlist\nbye\n")

        assert result.exit_code == 0
        assert "Hello! I'm Chip" in result.output
        assert " 1.[T][ ] Read a book" in result.output
        assert "Bye. Hope to see you again soon!" in result.output
        assert data_file.exists()

    def test_chat_ends_at_end_of_input(self, base_args):
        runner = CliRunner()

        result = runner.invoke(main, base_args + ["chat"], input="list\n")

        assert result.exit_code == 0
        assert "Bye. Hope to see you again soon!" in result.output

    def test_config_show(self, base_args, data_file):
        runner = CliRunner()

        result = runner.invoke(main, base_args + ["config"])

        assert result.exit_code == 0
        assert f"data_file: {data_file}" in result.output

    def test_config_init_writes_file(self, tmp_path, base_args):
        runner = CliRunner()

        result = runner.invoke(main, base_args + ["config", "--init"])

        assert result.exit_code == 0
        assert (tmp_path / "config.yaml").exists()
        assert "Configuration saved to" in result.output
