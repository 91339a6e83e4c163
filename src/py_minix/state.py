"""Session state and the boot sequence that creates it.

``State`` is the one context object the shell works against.  It owns
the file store, the environment, and the log.  There is no global
instance; callers create one with ``State.boot()`` and pass it along.

Boot happens once, in order:

1. **Tree** — build the file store with its seed files.
2. **Config** — read ``/env/startup_config`` and parse it.
3. **Environment** — load the parsed pairs as environment variables.

Anything that goes wrong here is fatal (``BootError``): the rest of
the system assumes ``CWD`` exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from py_minix.config import STARTUP_CONFIG_PATH, parse_config, render_config
from py_minix.env import Environment
from py_minix.errors import MinixError
from py_minix.fs.filesystem import FileSystem
from py_minix.fs.path import Path
from py_minix.logging import Logger, LogLevel

DEFAULT_CWD = "/"


class BootError(RuntimeError):
    """Raise when the startup config cannot be read or parsed."""


@dataclass
class State:
    """Everything a shell session needs: the tree, the env, and the log."""

    fs: FileSystem = field(default_factory=FileSystem)
    env: Environment = field(default_factory=Environment)
    logger: Logger = field(default_factory=Logger)

    @classmethod
    def boot(cls, fs: FileSystem | None = None) -> State:
        """Build the tree, load the startup config, and return the state.

        Args:
            fs: A pre-built file store to boot from.  Defaults to a
                freshly seeded one.

        Raises:
            BootError: If the config file is missing or malformed.

        """
        state = cls(fs=fs if fs is not None else FileSystem())
        state.logger.log(LogLevel.INFO, "File store ready", source="boot")
        try:
            state.load_startup_config()
        except MinixError as e:
            state.logger.log(LogLevel.ERROR, str(e), source="boot")
            msg = f"Cannot load startup config: {e}"
            raise BootError(msg) from e
        return state

    def load_startup_config(self) -> None:
        """Read and parse the startup config into the environment.

        Raises:
            MinixError: If the file cannot be resolved or parsed.

        """
        config = self.fs.resolve_file(Path.parse(STARTUP_CONFIG_PATH))
        values = parse_config(config.content)
        for key, value in values.items():
            self.env.set(key, value)
        self.logger.log(
            LogLevel.INFO,
            f"Loaded {len(values)} variables from {STARTUP_CONFIG_PATH}",
            source="boot",
        )

    def save_startup_config(self) -> None:
        """Write the environment back to the startup config file.

        Raises:
            MinixError: If the config file is no longer a file.

        """
        config = self.fs.resolve_file_mut(Path.parse(STARTUP_CONFIG_PATH))
        config.content = render_config(self.env.as_dict())

    @property
    def cwd(self) -> str:
        """Return the current directory as recorded in ``CWD``."""
        return self.env.get("CWD") or DEFAULT_CWD
