# display/style/overlay.py

from typing import List, Optional

from ..errors import PlacementError
from .definitions import Style


class Styles:
    """
    A width x height grid of ``Style`` values kept 1:1 with a block's text.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: List[Style] = [Style()] * (width * height)

    def set(self, row: int, col: int, styles: "Styles") -> None:
        """
        Merge ``styles`` into this overlay with its top-left cell at (row, col).

        Only attributes set by the incoming cells overwrite the destination.
        """
        if (row < 0 or col < 0
                or row + styles.height > self.height
                or col + styles.width > self.width):
            raise PlacementError(
                f"Styles of size {styles.width}x{styles.height} do not fit at "
                f"({row}, {col}) in {self.width}x{self.height}"
            )
        for r in range(styles.height):
            offset = (row + r) * self.width + col
            for c in range(styles.width):
                incoming = styles._cells[r * styles.width + c]
                if not incoming.is_unset():
                    self._cells[offset + c] = self._cells[offset + c].apply(incoming)

    def get(self, row: int, col: int) -> Optional[Style]:
        """Return the style at (row, col), or None outside the grid."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            return None
        return self._cells[row * self.width + col]

    def row(self, row: int) -> List[Style]:
        """Return the styles of one row."""
        start = row * self.width
        return self._cells[start:start + self.width]

    def clear(self, style: Style) -> None:
        """Assign ``style`` to every cell."""
        self._cells = [style] * (self.width * self.height)

    def __eq__(self, other):
        if not isinstance(other, Styles):
            return NotImplemented
        return (self.width, self.height, self._cells) == (other.width, other.height, other._cells)

    def __repr__(self):
        return f"Styles({self.width}x{self.height})"
