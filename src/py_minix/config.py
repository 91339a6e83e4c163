r"""Startup config parsing: ``KEY=VALUE`` lines into a mapping.

The format is deliberately bare:

- One assignment per line.  Lines end in ``\n`` or ``\r\n``; no other
  control character breaks a line.
- The key is everything before the first ``=``; the value is everything
  after it (so values may themselves contain ``=``).
- No comments, no escaping, no blank lines.  A line with no ``=`` at all
  is an ``InvalidAssignError``.
"""

from py_minix.errors import InvalidAssignError

STARTUP_CONFIG_PATH = "/env/startup_config"
"""Where the boot sequence reads its config from."""


def parse_config(text: str) -> dict[str, str]:
    """Parse *text* into a key/value mapping.

    Later assignments to the same key win.

    Raises:
        InvalidAssignError: If a line has no ``=`` separator.

    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    result: dict[str, str] = {}
    for raw in lines:
        line = raw.removesuffix("\r")
        key, sep, value = line.partition("=")
        if not sep:
            raise InvalidAssignError(line)
        result[key] = value
    return result


def render_config(values: dict[str, str]) -> str:
    """Render a mapping back into the ``KEY=VALUE`` line format."""
    return "\n".join(f"{key}={value}" for key, value in values.items())
