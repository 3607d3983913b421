# display/output.py

from typing import Callable, Iterator, List, Tuple

from .block import Block
from .style import ResolvedStyle

StyleFunc = Callable[[ResolvedStyle, str], str]


class StyledOutput:
    """
    Writes a block through a caller-supplied style function.

    The style function receives a resolved style and a piece of text and
    returns the text wrapped in whatever escape sequences the target terminal
    needs. A row is not written in a single call: each run of equally styled
    cells gets its own call so per-cell styles reach the terminal, followed
    by one call with the default style and empty text to reset the line. A
    uniformly styled row is exactly one call plus the reset call.
    """

    def __init__(self, block: Block, style_func: StyleFunc):
        self.block = block
        self.style_func = style_func

    def runs(self, row: int) -> List[Tuple[ResolvedStyle, str]]:
        """Split one row into (style, text) runs of identical resolved style."""
        text = self.block.row(row)
        runs: List[Tuple[ResolvedStyle, List[str]]] = []
        for ch, style in zip(text, self.block.styles.row(row)):
            resolved = style.resolved()
            if runs and runs[-1][0] == resolved:
                runs[-1][1].append(ch)
            else:
                runs.append((resolved, [ch]))
        return [(style, ''.join(chars)) for style, chars in runs]

    def lines(self) -> Iterator[str]:
        """Yield each styled row, newline included."""
        for row in range(self.block.height):
            parts = [self.style_func(style, text) for style, text in self.runs(row)]
            parts.append(self.style_func(ResolvedStyle(), ""))
            yield ''.join(parts) + "\n"

    def render(self) -> str:
        return ''.join(self.lines())

    def __str__(self):
        return self.render()
