"""Environment variables loaded from the startup config.

The boot sequence reads ``/env/startup_config``, parses its
``KEY=VALUE`` lines and stores them here.  ``CWD`` is the one variable
the shell relies on: the current directory is tracked as a path string,
never as a handle into the tree, so it is re-resolved from the root
whenever it is used.
"""


class Environment:
    """A key-value store for environment variables.

    Each instance owns its own copy of the variables it was created
    with; changing one environment never affects another.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def delete(self, key: str) -> None:
        """Remove *key* from the environment.

        Raises:
            KeyError: If *key* does not exist.

        """
        del self._vars[key]

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the variables as a plain dict."""
        return dict(self._vars)

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set."""
        return key in self._vars

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)
