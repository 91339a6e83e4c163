"""The two kinds of node in the tree: files and folders.

``Node`` is a closed union.  Traversal code matches on ``File`` and
``Folder`` directly; there is no base class to extend.  A folder owns
its children outright, so the tree has no sharing, no cycles and no
parent pointers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class File:
    """A leaf node holding a single text buffer."""

    content: str = ""


@dataclass
class Folder:
    """An interior node mapping child names to nodes."""

    children: dict[str, Node] = field(default_factory=dict)  # pyright: ignore[reportUnknownVariableType]


type Node = File | Folder


@dataclass(frozen=True)
class FileView:
    """Read-only handle onto a live ``File``.

    Reads go straight through to the underlying file, so the content is
    never copied, and a later write through a mutable handle is visible
    here too.
    """

    _file: File

    @property
    def content(self) -> str:
        """Return the file's current content."""
        return self._file.content
