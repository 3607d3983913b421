# test_block.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from trex.display import Block, Color, Format, PlacementError, Style, Styles


class TestBlock:
    """Test suite for the character canvas."""

    def setup_method(self):
        self.block = Block(10, 5)

    def test_from_text_size(self):
        block = Block.from_text("My\nfirst\nblock")
        assert block.width == 5
        assert block.height == 3

    def test_from_text_trailing_newline(self):
        block = Block.from_text("ab\n")
        assert (block.width, block.height) == (2, 1)

    def test_empty_block(self):
        block = Block.from_text("")
        assert (block.width, block.height) == (0, 0)
        assert block.as_str() == ""

    def test_new_block_is_blank(self):
        assert self.block.rows() == [" " * 10] * 5

    def test_set_block_in_block(self):
        self.block.set(2, 1, Block.from_text("My\nfirst\nblock"))

        assert self.block.as_str() == (
            "          \n"
            "          \n"
            " My       \n"
            " first    \n"
            " block    \n"
        )

    def test_set_text_overwrites_spaces(self):
        self.block.set(0, 0, "xxxxxxxxxx")
        self.block.set(0, 2, "a b")
        assert self.block.rows()[0] == "xxa bxxxxx"

    def test_row_matches_rows(self):
        self.block.set(3, 2, "abc")
        assert [self.block.row(r) for r in range(5)] == self.block.rows()
        assert self.block.row(3) == "  abc     "

    def test_str_matches_as_str(self):
        self.block.set(0, 0, "hi")
        assert str(self.block) == self.block.as_str()

    @pytest.mark.parametrize("row, col, content", [
        (0, 9, "ab"),
        (5, 0, "a"),
        (4, 0, "a\nb"),
        (-1, 0, "a"),
        (0, -1, "a"),
        (0, 0, "x" * 11),
    ])
    def test_set_outside_bounds(self, row, col, content):
        with pytest.raises(PlacementError):
            self.block.set(row, col, content)

    def test_set_oversized_block(self):
        with pytest.raises(PlacementError):
            self.block.set(0, 0, Block(11, 1))

    def test_failed_set_leaves_block_unchanged(self):
        with pytest.raises(PlacementError):
            self.block.set(4, 0, "abc\ndef")
        assert self.block.rows() == [" " * 10] * 5

    def test_equality_includes_styles(self):
        first = Block.from_text("ab")
        second = Block.from_text("ab")
        assert first == second

        second.with_styles(lambda styles: styles.clear(Style(foreground=Color.RED)))
        assert first != second

    def test_text_placement_keeps_styles(self):
        self.block.with_styles(lambda styles: styles.clear(Style(foreground=Color.RED)))
        self.block.set(0, 0, "abc")
        assert self.block.style_at(0, 0) == Style(foreground=Color.RED)


class TestStyleMerging:
    """Style overlay behaviour when blocks are composed."""

    def setup_method(self):
        self.dest = Block(3, 1)
        self.dest.with_styles(lambda styles: styles.clear(Style(background=Color.RED)))

    def test_incoming_attributes_overwrite(self):
        src = Block.from_text("x")
        src.with_styles(lambda styles: styles.clear(Style(foreground=Color.BLUE)))

        self.dest.set(0, 1, src)

        assert self.dest.style_at(0, 1) == Style(foreground=Color.BLUE, background=Color.RED)
        assert self.dest.style_at(0, 0) == Style(background=Color.RED)
        assert self.dest.style_at(0, 2) == Style(background=Color.RED)

    def test_unset_incoming_leaves_destination(self):
        self.dest.set(0, 0, Block.from_text("abc"))
        assert all(self.dest.style_at(0, c) == Style(background=Color.RED) for c in range(3))

    def test_explicit_reset_overwrites(self):
        src = Block.from_text("x")
        src.with_styles(lambda styles: styles.clear(Style(background=Color.RESET)))

        self.dest.set(0, 0, src)

        assert self.dest.style_at(0, 0) == Style(background=Color.RESET)
        assert self.dest.style_at(0, 0).resolved().background == Color.RESET

    def test_nested_placement_carries_styles(self):
        inner = Block.from_text("x")
        inner.with_styles(lambda styles: styles.clear(Style(format=Format.BOLD)))
        middle = Block(2, 1)
        middle.set(0, 1, inner)

        self.dest.set(0, 1, middle)

        assert self.dest.style_at(0, 1) == Style(background=Color.RED)
        assert self.dest.style_at(0, 2) == Style(background=Color.RED, format=Format.BOLD)


class TestStyles:
    """Test suite for the bare style overlay."""

    def setup_method(self):
        self.styles = Styles(4, 2)

    def test_new_overlay_is_unset(self):
        assert all(style.is_unset() for style in self.styles.row(0) + self.styles.row(1))

    def test_get_outside_bounds(self):
        assert self.styles.get(2, 0) is None
        assert self.styles.get(0, 4) is None
        assert self.styles.get(-1, 0) is None

    def test_set_outside_bounds(self):
        with pytest.raises(PlacementError):
            self.styles.set(1, 2, Styles(3, 1))

    def test_clear(self):
        self.styles.clear(Style(format=Format.UNDERLINE))
        assert self.styles.get(1, 3) == Style(format=Format.UNDERLINE)

    def test_row(self):
        other = Styles(1, 1)
        other.clear(Style(foreground=Color.CYAN))
        self.styles.set(1, 2, other)

        assert self.styles.row(1) == [Style(), Style(), Style(foreground=Color.CYAN), Style()]


class TestStyle:
    """The tri-state per-cell style."""

    def test_apply_overwrites_set_attributes_only(self):
        base = Style(foreground=Color.RED, format=Format.BOLD)
        merged = base.apply(Style(foreground=Color.GREEN, background=Color.BLACK))
        assert merged == Style(Color.GREEN, Color.BLACK, Format.BOLD)

    def test_apply_returns_new_style(self):
        base = Style(foreground=Color.RED)
        base.apply(Style(foreground=Color.GREEN))
        assert base == Style(foreground=Color.RED)

    def test_resolved_defaults_to_reset(self):
        resolved = Style(foreground=Color.BLUE).resolved()
        assert resolved.foreground == Color.BLUE
        assert resolved.background == Color.RESET
        assert resolved.format == Format.RESET

    def test_is_unset(self):
        assert Style().is_unset()
        assert not Style(format=Format.RESET).is_unset()
