"""Error kinds raised by the file store and the startup config loader.

Every error carries the offending path (or config line) so it can be
shown to the user.  The shell catches ``MinixError`` at its dispatch
boundary and prints the message; only a failure while booting is fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from py_minix.fs.path import Path


class MinixError(Exception):
    """Base class for every error the file store can raise."""


class _PathError(MinixError):
    """An error about a specific path."""

    _template = "the path {path} is invalid"

    def __init__(self, path: Path) -> None:
        """Record the offending path and build the message."""
        self.path = path
        super().__init__(self._template.format(path=path))


class NotAFileError(_PathError):
    """Raise when a path does not name exactly one file."""

    _template = "the path {path} is not a valid file"


class NotAFolderError(_PathError):
    """Raise when a path that must name a folder runs into a file."""

    _template = "the path {path} is not a valid folder"


class DoesntExistError(_PathError):
    """Raise when a path segment has no matching child."""

    _template = "the path {path} does not exist"


class FileExistsInFolderError(_PathError):
    """Raise when creating a node whose name is already taken."""

    _template = "the path {path} already exists"


class InvalidAssignError(MinixError):
    """Raise when a config line has no ``=`` separator."""

    def __init__(self, assignment: str) -> None:
        """Record the offending line and build the message."""
        self.assignment = assignment
        super().__init__(f"the assignment {assignment} is invalid")
