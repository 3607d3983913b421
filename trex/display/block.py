# display/block.py

from typing import Callable, List, Optional, Union

from .errors import PlacementError
from .style import Style, Styles


def text_lines(text: str) -> List[str]:
    """Split text into lines; a trailing newline does not start a new line."""
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return lines


class Block:
    """
    Fixed-size character canvas with an aligned style overlay.

    Blocks never resize: content placed with ``set`` must already fit.
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self._cells: List[List[str]] = [[' '] * width for _ in range(height)]
        self.styles = Styles(width, height)

    @classmethod
    def from_text(cls, text: str) -> "Block":
        """Create a block exactly large enough to hold ``text``."""
        lines = text_lines(text)
        block = cls(max((len(ln) for ln in lines), default=0), len(lines))
        block.set(0, 0, text)
        return block

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set(self, row: int, col: int, content: Union["Block", str]) -> None:
        """
        Overwrite the region at (row, col) with ``content``.

        Placing a block also merges its styles into this block's overlay.
        Raises PlacementError when the content does not fit.
        """
        if isinstance(content, Block):
            lines = content.rows()
        else:
            lines = text_lines(content)

        if row < 0 or col < 0 or row + len(lines) > self._height:
            raise PlacementError(
                f"{len(lines)} line(s) do not fit at ({row}, {col}) in {self._width}x{self._height}"
            )
        for ln in lines:
            if col + len(ln) > self._width:
                raise PlacementError(
                    f"Line {ln!r} does not fit at column {col} in width {self._width}"
                )

        if isinstance(content, Block):
            self.styles.set(row, col, content.styles)

        for offset, ln in enumerate(lines):
            self._cells[row + offset][col:col + len(ln)] = list(ln)

    def with_styles(self, func: Callable[[Styles], None]) -> None:
        """Call ``func`` with this block's style overlay."""
        func(self.styles)

    def style_at(self, row: int, col: int) -> Optional[Style]:
        return self.styles.get(row, col)

    def row(self, row: int) -> str:
        """Return one row of content, without the newline."""
        return ''.join(self._cells[row])

    def rows(self) -> List[str]:
        """Return the content row by row, without newlines."""
        return [''.join(cells) for cells in self._cells]

    def as_str(self) -> str:
        return ''.join(f"{ln}\n" for ln in self.rows())

    def __str__(self):
        return self.as_str()

    def __eq__(self, other):
        if not isinstance(other, Block):
            return NotImplemented
        return self._cells == other._cells and self.styles == other.styles

    def __repr__(self):
        return f"Block({self._width}x{self._height})"
