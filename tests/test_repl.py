"""Tests for the REPL helpers and loop.

The loop itself is driven by patching ``input`` and ``print``.
"""

from unittest.mock import patch

from py_minix.logging import LogEntry, LogLevel
from py_minix.repl import build_prompt, format_boot_log, run
from py_minix.state import State


class TestBuildPrompt:
    """Verify the prompt shows the current directory."""

    def test_prompt_shows_cwd(self) -> None:
        """A fresh boot should prompt with the root."""
        assert build_prompt(State.boot()) == "/ $ "

    def test_prompt_follows_cwd(self) -> None:
        """Changing CWD should change the prompt."""
        state = State.boot()
        state.env.set("CWD", "/usr/home/")
        assert build_prompt(state) == "/usr/home/ $ "


class TestFormatBootLog:
    """Verify the boot banner."""

    def test_entries_are_indented(self) -> None:
        """Each entry should appear on its own indented line."""
        entries = [LogEntry(level=LogLevel.INFO, message="ready", source="boot")]
        output = format_boot_log(entries)
        assert "  [INFO] boot: ready" in output
        assert "help" in output


class TestRun:
    """Verify the loop wiring."""

    def test_runs_commands_until_exit(self) -> None:
        """Output should be printed until exit is typed."""
        with (
            patch("builtins.input", side_effect=["cat /env/startup_config", "exit"]),
            patch("builtins.print") as mock_print,
        ):
            run()
        printed = [call.args[0] for call in mock_print.call_args_list if call.args]
        assert "CWD=/\nUSER_DIR=/usr/home/" in printed

    def test_eof_exits(self) -> None:
        """Ctrl+D should end the loop cleanly."""
        with (
            patch("builtins.input", side_effect=EOFError),
            patch("builtins.print") as mock_print,
        ):
            run()
        assert mock_print.called

    def test_unknown_command_keeps_session(self) -> None:
        """Unknown commands should be printed and the loop should continue."""
        with (
            patch("builtins.input", side_effect=["mkfs", "exit"]),
            patch("builtins.print") as mock_print,
        ):
            run()
        printed = [call.args[0] for call in mock_print.call_args_list if call.args]
        assert "unknown command: mkfs" in printed
