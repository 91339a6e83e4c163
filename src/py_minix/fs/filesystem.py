"""In-memory file store: a rooted tree of folders and files.

The tree is made of owned ``Folder`` and ``File`` nodes (see
``nodes.py``).  Every operation takes a ``Path`` and walks from the
root, looking up one segment per level.

Resolution comes in two flavours:

- **resolve_file** (read) is lenient.  If the walk reaches a file while
  segments remain, the walk stops there and that file is the answer, so
  ``/a/b/c`` resolves to ``/a`` when ``/a`` is a file.
- **resolve_file_mut** (write) is strict.  The path must name a file
  exactly; leftover segments after a file are ``NotAFileError``.

The asymmetry is kept on purpose so existing read callers keep working.

Access contract:
    The store is single-threaded.  A mutable handle from
    ``resolve_file_mut`` must not be held while any other resolution
    runs against the same store.  A multi-threaded caller would need a
    reader-writer lock around the root folder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_minix.errors import (
    DoesntExistError,
    FileExistsInFolderError,
    NotAFileError,
    NotAFolderError,
)
from py_minix.fs.nodes import File, FileView, Folder

if TYPE_CHECKING:
    from py_minix.fs.nodes import Node
    from py_minix.fs.path import Path

STARTUP_CONFIG_CONTENT = "CWD=/\nUSER_DIR=/usr/home/"
"""Seed content of ``/env/startup_config``."""


def _lookup(folder: Folder, segment: str, path: Path) -> Node:
    """Return the child *segment* of *folder*, or raise DoesntExistError."""
    child = folder.children.get(segment)
    if child is None:
        raise DoesntExistError(path)
    return child


class FileSystem:
    """A tree of folders and files rooted at a single folder.

    A fresh store is seeded with ``/env/startup_config`` so the boot
    sequence has a config file to read.
    """

    def __init__(self, *, seed: bool = True) -> None:
        """Create the root folder and, by default, the seed files.

        Args:
            seed: Install ``/env/startup_config``.  Tests turn this off
                to start from an empty root.

        """
        self._root = Folder()
        if seed:
            self._seed()

    def _seed(self) -> None:
        """Install the ``env`` folder and its startup config file."""
        env = Folder()
        env.children["startup_config"] = File(content=STARTUP_CONFIG_CONTENT)
        self._root.children["env"] = env

    @property
    def root(self) -> Folder:
        """Return the root folder."""
        return self._root

    # -- Resolution ------------------------------------------------------

    def resolve_file(self, path: Path) -> FileView:
        """Return a read-only handle to the file at *path*.

        The walk stops at the first file it meets; any segments after it
        are ignored.

        Raises:
            NotAFileError: If *path* is the root or ends on a folder.
            DoesntExistError: If a segment has no matching child.

        """
        if path.is_root:
            raise NotAFileError(path)

        first, *rest = path.segments
        node = _lookup(self._root, first, path)
        for segment in rest:
            match node:
                case File():
                    return FileView(node)
                case Folder():
                    node = _lookup(node, segment, path)

        match node:
            case File():
                return FileView(node)
            case Folder():
                raise NotAFileError(path)

    def resolve_file_mut(self, path: Path) -> File:
        """Return the mutable file at *path*.

        Unlike ``resolve_file``, the path must end exactly on the file.

        Raises:
            NotAFileError: If *path* is the root, ends on a folder, or
                continues past a file.
            DoesntExistError: If a segment has no matching child.

        """
        if path.is_root:
            raise NotAFileError(path)

        first, *rest = path.segments
        node = _lookup(self._root, first, path)
        for segment in rest:
            match node:
                case File():
                    raise NotAFileError(path)
                case Folder():
                    node = _lookup(node, segment, path)

        match node:
            case File():
                return node
            case Folder():
                raise NotAFileError(path)

    def resolve_folder(self, path: Path) -> Folder:
        """Return the folder at *path* (the root for an empty path).

        Every segment, including intermediate ones, must be a folder.

        Raises:
            NotAFolderError: If any segment names a file.
            DoesntExistError: If a segment has no matching child.

        """
        node: Node = self._root
        for segment in path.segments:
            match node:
                case File():
                    raise NotAFolderError(path)
                case Folder():
                    node = _lookup(node, segment, path)

        match node:
            case File():
                raise NotAFolderError(path)
            case Folder():
                return node

    def exists(self, path: Path) -> bool:
        """Check whether *path* names a node (the root always exists)."""
        node: Node = self._root
        for segment in path.segments:
            match node:
                case File():
                    return False
                case Folder():
                    child = node.children.get(segment)
                    if child is None:
                        return False
                    node = child
        return True

    # -- Mutation --------------------------------------------------------

    def create_folder(self, path: Path) -> Folder:
        """Create an empty folder at *path* and return it.

        Raises:
            NotAFolderError: If *path* is the root, ends in an empty
                segment, or its parent is not a folder.
            DoesntExistError: If the parent does not exist.
            FileExistsInFolderError: If the name is already taken.

        """
        if path.is_root or not path.name:
            raise NotAFolderError(path)
        folder = Folder()
        self._insert(path, folder)
        return folder

    def create_file(self, path: Path, content: str = "") -> File:
        """Create a file at *path* holding *content* and return it.

        Raises:
            NotAFileError: If *path* is the root or ends in an empty segment.
            NotAFolderError: If the parent is not a folder.
            DoesntExistError: If the parent does not exist.
            FileExistsInFolderError: If the name is already taken.

        """
        if path.is_root or not path.name:
            raise NotAFileError(path)
        new_file = File(content=content)
        self._insert(path, new_file)
        return new_file

    def _insert(self, path: Path, node: Node) -> None:
        """Link *node* into the parent folder of *path*."""
        parent = self.resolve_folder(path.parent)
        if path.name in parent.children:
            raise FileExistsInFolderError(path)
        parent.children[path.name] = node

    def list_folder(self, path: Path) -> list[str]:
        """List the children of the folder at *path*.

        Folder names carry a trailing ``/`` so they can be told apart
        from files.

        Raises:
            NotAFolderError: If *path* runs into a file.
            DoesntExistError: If a segment has no matching child.

        """
        folder = self.resolve_folder(path)
        return sorted(
            f"{name}/" if isinstance(child, Folder) else name
            for name, child in folder.children.items()
        )
