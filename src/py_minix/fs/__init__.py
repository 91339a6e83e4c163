"""File store subsystem: paths, nodes, and the folder/file tree.

Re-exports public symbols so callers can write::

    from py_minix.fs import FileSystem, Path
"""

from py_minix.fs.filesystem import STARTUP_CONFIG_CONTENT, FileSystem
from py_minix.fs.nodes import File, FileView, Folder, Node
from py_minix.fs.path import Path

__all__ = [
    "STARTUP_CONFIG_CONTENT",
    "File",
    "FileSystem",
    "FileView",
    "Folder",
    "Node",
    "Path",
]
