"""Tests for path parsing and rendering.

Parsing splits on ``/`` and keeps every piece after the first, even
empty ones.  Rendering always ends in ``/``, so it is not an exact
inverse of parsing.
"""

import pytest

from py_minix.fs.path import Path


class TestParse:
    """Verify turning strings into segments."""

    def test_simple_path(self) -> None:
        """A two-level path should yield two segments."""
        assert Path.parse("/a/b").segments == ("a", "b")

    def test_root_has_one_empty_segment(self) -> None:
        """A lone slash leaves one empty segment after the split."""
        assert Path.parse("/").segments == ("",)

    def test_empty_string_is_root(self) -> None:
        """An empty string has no segments at all."""
        assert Path.parse("").is_root

    def test_double_slash_keeps_empty_segment(self) -> None:
        """Consecutive slashes should produce an empty segment."""
        assert Path.parse("//a").segments == ("", "a")

    def test_trailing_slash_keeps_empty_segment(self) -> None:
        """A trailing slash should produce a final empty segment."""
        assert Path.parse("/a/b/").segments == ("a", "b", "")

    def test_missing_leading_slash_drops_first_piece(self) -> None:
        """The piece before the first slash is always discarded."""
        assert Path.parse("a/b").segments == ("b",)


class TestRender:
    """Verify turning segments back into strings."""

    def test_render_adds_trailing_slash(self) -> None:
        """Parsing then rendering adds a trailing slash."""
        assert str(Path.parse("/a/b")) == "/a/b/"

    def test_render_usr_bin(self) -> None:
        """Segments usr, bin render as /usr/bin/."""
        assert str(Path(("usr", "bin"))) == "/usr/bin/"

    def test_render_root(self) -> None:
        """The root renders as a single slash."""
        assert str(Path()) == "/"


class TestPathHelpers:
    """Verify name, parent, and child."""

    def test_name_is_last_segment(self) -> None:
        """The name should be the final segment."""
        assert Path.parse("/env/startup_config").name == "startup_config"

    def test_root_has_no_name(self) -> None:
        """Asking the root for its name should raise."""
        with pytest.raises(ValueError, match="root"):
            _ = Path().name

    def test_parent_drops_last_segment(self) -> None:
        """The parent should have one fewer segment."""
        assert Path.parse("/a/b/c").parent == Path(("a", "b"))

    def test_parent_of_root_is_root(self) -> None:
        """The root is its own parent."""
        assert Path().parent.is_root

    def test_child_appends(self) -> None:
        """child() should append a segment without changing the original."""
        base = Path.parse("/a")
        assert base.child("b") == Path(("a", "b"))
        assert base == Path(("a",))

    def test_len_counts_segments(self) -> None:
        """len() should count segments."""
        expected = 3
        assert len(Path.parse("/x/y/z")) == expected
