"""Interactive REPL (Read-Eval-Print Loop) for the file store.

The REPL boots a ``State``, creates a shell, and loops:

    1. **Read** — print the current directory prompt and read a line.
    2. **Eval** — pass the line to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until ``exit``, Ctrl+D or Ctrl+C.

The helpers ``build_prompt`` and ``format_boot_log`` are pure and
testable; ``run()`` is the I/O entrypoint.
"""

import readline  # noqa: F401  (line editing and history for input())
import sys

from py_minix.logging import LogEntry
from py_minix.shell import Shell
from py_minix.state import BootError, State


def format_boot_log(entries: list[LogEntry]) -> str:
    """Format boot log entries for display before the first prompt."""
    body = "\n".join(f"  {entry}" for entry in entries)
    footer = "\nType 'help' for commands, 'exit' to quit.\n"
    return body + footer


def build_prompt(state: State) -> str:
    """Build the prompt string showing the current directory.

    Returns:
        A prompt like ``/ $ ``.

    """
    return f"{state.cwd} $ "


def run() -> None:
    """Boot the file store and run the interactive REPL."""
    try:
        state = State.boot()
    except BootError as e:
        sys.exit(str(e))

    shell = Shell(state=state)
    print(format_boot_log(state.logger.entries))  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(state))
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201
