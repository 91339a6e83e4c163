"""The shell: command interpreter for the file store.

The shell reads a command line, splits it on whitespace, picks a
handler by the first token and returns the handler's output as a
string.  It never prints; the REPL (or the web UI) decides how to show
the result.

Failures from the file store arrive as ``MinixError``.  They are caught
here, logged, and turned into an ``Error: ...`` line so the session
keeps going.  Unknown commands are reported and otherwise ignored.
"""

from collections.abc import Callable

from py_minix.errors import MinixError
from py_minix.fs.path import Path
from py_minix.logging import LogLevel
from py_minix.state import State

# Type alias for a command handler: takes a list of args, returns output.
type _Handler = Callable[[list[str]], str]


class Shell:
    """Command interpreter bound to a booted ``State``."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, state: State) -> None:
        """Create a shell that operates on *state*."""
        self._state = state

        # Command dispatch table — maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "mkdir": self._cmd_mkdir,
            "touch": self._cmd_touch,
            "ls": self._cmd_ls,
            "cat": self._cmd_cat,
            "write": self._cmd_write,
            "env": self._cmd_env,
            "export": self._cmd_export,
            "unset": self._cmd_unset,
            "dmesg": self._cmd_dmesg,
            "exit": self._cmd_exit,
        }

    @property
    def state(self) -> State:
        """Return the state this shell works against."""
        return self._state

    @property
    def commands(self) -> list[str]:
        """Return the sorted list of command names."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw line (e.g. ``"cat /env/startup_config"``).

        Returns:
            The command output, an error line, or ``""``.

        """
        parts = command.split()
        if not parts:
            return ""

        name, args = parts[0], parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            self._state.logger.log(LogLevel.INFO, f"unknown command {name}", source="shell")
            return f"unknown command: {name}"

        try:
            return handler(args)
        except MinixError as e:
            self._state.logger.log(LogLevel.WARNING, f"{name}: {e}", source="shell")
            return f"Error: {e}"

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.commands)

    def _cmd_mkdir(self, args: list[str]) -> str:
        """Create a folder."""
        if not args:
            return "Usage: mkdir <path>"
        self._state.fs.create_folder(Path.parse(args[0]))
        return ""

    def _cmd_touch(self, args: list[str]) -> str:
        """Create an empty file."""
        if not args:
            return "Usage: touch <path>"
        self._state.fs.create_file(Path.parse(args[0]))
        return ""

    def _cmd_ls(self, args: list[str]) -> str:
        """List a folder (the root when no path is given)."""
        path = Path.parse(args[0]) if args else Path()
        return "\n".join(self._state.fs.list_folder(path))

    def _cmd_cat(self, args: list[str]) -> str:
        """Print a file's content."""
        if not args:
            return "Usage: cat <path>"
        return self._state.fs.resolve_file(Path.parse(args[0])).content

    def _cmd_write(self, args: list[str]) -> str:
        """Replace a file's content."""
        if len(args) < 2:  # noqa: PLR2004
            return "Usage: write <path> <content...>"
        target = self._state.fs.resolve_file_mut(Path.parse(args[0]))
        target.content = " ".join(args[1:])
        return ""

    def _cmd_env(self, _args: list[str]) -> str:
        """List all environment variables."""
        items = self._state.env.items()
        return "\n".join(f"{k}={v}" for k, v in sorted(items)) if items else "No variables set."

    def _cmd_export(self, args: list[str]) -> str:
        """Set an environment variable and save it to the startup config."""
        if not args or "=" not in args[0]:
            return "Usage: export KEY=VALUE"
        key, value = args[0].split("=", 1)
        self._state.env.set(key, value)
        self._state.save_startup_config()
        return ""

    def _cmd_unset(self, args: list[str]) -> str:
        """Remove an environment variable and save the startup config."""
        if not args:
            return "Usage: unset KEY"
        try:
            self._state.env.delete(args[0])
        except KeyError:
            return f"Error: {args[0]} is not set"
        self._state.save_startup_config()
        return ""

    def _cmd_dmesg(self, args: list[str]) -> str:
        """Show the log buffer; ``-c`` also clears it."""
        entries = self._state.logger.entries
        if args and args[0] == "-c":
            self._state.logger.clear()
        return "\n".join(str(e) for e in entries) if entries else "Log is empty."

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL
