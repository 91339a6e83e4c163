"""Slash-delimited paths as ordered segment sequences.

A path string like ``/usr/bin`` is stored as the segments
``("usr", "bin")``.  Parsing is total: it never rejects input.  The
leading component before the first ``/`` is dropped and every other
component is kept, even empty ones, so ``"//a"`` becomes ``("", "a")``.
Bad segments only show up later, when resolution fails to find them.

Rendering always writes a trailing slash, so ``str(Path.parse("/a/b"))``
is ``"/a/b/"``.  Render is therefore not an exact inverse of parse; it
exists for error messages, not for round-tripping.
"""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True)
class Path:
    """An ordered, immutable sequence of path segments.

    An empty sequence is the root, which is a folder and so never
    resolves to a file.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Path:
        """Split *text* on ``/`` and keep everything after the first piece."""
        return cls(tuple(text.split(SEPARATOR)[1:]))

    @property
    def is_root(self) -> bool:
        """Return True if the path has no segments."""
        return not self.segments

    @property
    def name(self) -> str:
        """Return the final segment.

        Raises:
            ValueError: If the path is the root.

        """
        if self.is_root:
            msg = "The root path has no name"
            raise ValueError(msg)
        return self.segments[-1]

    @property
    def parent(self) -> Path:
        """Return the path without its final segment (root stays root)."""
        return Path(self.segments[:-1])

    def child(self, name: str) -> Path:
        """Return a new path with *name* appended."""
        return Path((*self.segments, name))

    def __len__(self) -> int:
        """Return the number of segments."""
        return len(self.segments)

    def __str__(self) -> str:
        """Render as ``/seg1/seg2/.../``."""
        return SEPARATOR + "".join(f"{seg}{SEPARATOR}" for seg in self.segments)
