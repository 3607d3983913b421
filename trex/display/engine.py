# display/engine.py

from typing import Callable, Dict, List, Optional, Type

from ..parser.nodes import (
    Alphanumeric, Alternation, Any, AsciiRange, Capturing, Digit, End,
    Literal, Node, NotAlphanumeric, NotDigit, NotWhitespace, Repetition,
    Sequence, Start, Whitespace, WordBoundary,
)
from .block import Block
from .style import DEFAULT_DEFINITIONS, RenderDefinitions

SPECIAL_GLYPHS: Dict[Type[Node], str] = {
    Start: '^',
    End: '$',
    Any: '.',
    Alphanumeric: '\\w',
    NotAlphanumeric: '\\W',
    Digit: '\\d',
    NotDigit: '\\D',
    Whitespace: '\\s',
    NotWhitespace: '\\S',
    WordBoundary: '\\b',
}


def repetition_label(minimum: int, maximum: Optional[int]) -> str:
    """Return the bound summary drawn under a repeat loop."""
    if maximum is None:
        return ".." if minimum == 0 else f"{minimum}.."
    if minimum == 0 and maximum == 1:
        return ""
    if minimum == maximum:
        return f"={minimum}"
    if minimum == 0:
        return f"..={maximum}"
    return f"{minimum}..={maximum}"


class RenderEngine:
    """
    Lays out a pattern AST as a box-drawing diagram.

    Every node is rendered bottom-up into its own block, which the parent
    then places into a block sized to fit all of its children exactly.
    """

    def __init__(self, definitions: RenderDefinitions = DEFAULT_DEFINITIONS, logger=None):
        self.definitions = definitions
        self.logger = logger
        self._renderers: Dict[Type[Node], Callable[[Node], Block]] = {
            Literal: self._render_literal,
            AsciiRange: self._render_range,
            Sequence: self._render_sequence,
            Alternation: self._render_alternation,
            Repetition: self._render_repetition,
            Capturing: self._render_capturing,
        }
        for node_type in SPECIAL_GLYPHS:
            self._renderers[node_type] = self._render_special

    def render(self, node: Node) -> Block:
        """Render ``node`` and everything below it into a single block."""
        block = self._render(node)
        if self.logger:
            self.logger.debug(f"Rendered {type(node).__name__} into {block.width}x{block.height}")
        return block

    def _render(self, node: Node) -> Block:
        for node_type in type(node).__mro__:
            renderer = self._renderers.get(node_type)
            if renderer:
                return renderer(node)
        raise TypeError(f"No renderer for node type {type(node).__name__}")

    # ========= Leaves ==========

    def _render_literal(self, node: Literal) -> Block:
        return Block.from_text(self.definitions.control_glyphs.get(node.char, node.char))

    def _render_range(self, node: AsciiRange) -> Block:
        return Block.from_text(f"{node.low}-{node.high}")

    def _render_special(self, node: Node) -> Block:
        block = Block.from_text(SPECIAL_GLYPHS[type(node)])
        block.with_styles(lambda styles: styles.clear(self.definitions.highlight))
        return block

    # ========= Composites ==========

    def _render_sequence(self, node: Sequence) -> Block:
        blocks = [self._render(child) for child in node.items]
        width = sum(b.width for b in blocks)
        height = max((b.height for b in blocks), default=0)

        block = Block(width, height)
        col = 0
        for child in blocks:
            block.set((height - child.height) // 2, col, child)
            col += child.width
        return block

    def _render_alternation(self, node: Alternation) -> Block:
        if len(node.options) == 1:
            return self._render(node.options[0])

        glyph = self.definitions.glyph
        blocks = [self._render(child) for child in node.options]
        # Empty alternatives still need a row for their path.
        slots = [max(b.height, 1) for b in blocks]
        inner = max(b.width for b in blocks)
        height = sum(slots)
        if height % 2 == 0:
            height += 1
        middle = height // 2

        tops: List[int] = []
        row = 0
        for slot in slots:
            tops.append(row)
            row += slot
        first_center = slots[0] // 2
        last_center = tops[-1] + slots[-1] // 2

        block = Block(inner + 2, height)
        for r in range(first_center, last_center):
            block.set(r, 0, glyph('spine') + " " * inner + glyph('spine'))
        block.set(middle, 0, glyph('entry') + " " * inner + glyph('exit'))

        for idx, (child, top, slot) in enumerate(zip(blocks, tops, slots)):
            center = top + slot // 2
            block.set(center, 0, self._branch_line(idx, len(blocks), center, middle, inner))
            block.set(top, 1, child)
        return block

    def _branch_line(self, idx: int, count: int, center: int, middle: int, inner: int) -> str:
        """Return the connector row for the child whose center row is ``center``."""
        if center == middle:
            if idx == 0:
                left = right = 'top_branch'
            elif idx == count - 1:
                left = right = 'bottom_branch'
            else:
                left = right = 'cross_branch'
        elif center < middle and idx == 0:
            left, right = 'upper_left', 'upper_right'
        elif center > middle and idx == count - 1:
            left, right = 'lower_left', 'lower_right'
        else:
            left, right = 'left_tee', 'right_tee'

        glyph = self.definitions.glyph
        return glyph(left) + glyph('line') * inner + glyph(right)

    def _render_repetition(self, node: Repetition) -> Block:
        glyph = self.definitions.glyph
        child = self._render(node.child)
        label = repetition_label(node.minimum, node.maximum)
        inner = max(child.width, len(label), 2)

        block = Block(inner + 2, child.height + 4)
        middle = block.height // 2

        if node.minimum == 0:
            block.set(1, 0, glyph('upper_left') + glyph('line') * inner + glyph('upper_right'))
            for r in range(2, middle):
                block.set(r, 0, glyph('spine') + " " * inner + glyph('spine'))
            block.set(middle, 0, glyph('bottom_branch') + glyph('line') * inner + glyph('bottom_branch'))
        else:
            block.set(middle, 0, glyph('line') * (inner + 2))

        if node.maximum is None or node.maximum > 1:
            block.set(child.height + 2, 1,
                      glyph('lower_left') + glyph('line') * (inner - 2) + glyph('lower_right'))
            block.set(child.height + 3, 1, label)

        block.set(2, 1, child)
        return block

    def _render_capturing(self, node: Capturing) -> Block:
        return self._render(node.child)


def render(node: Node, definitions: RenderDefinitions = DEFAULT_DEFINITIONS, logger=None) -> Block:
    """Render a pattern AST into a styled block."""
    return RenderEngine(definitions, logger=logger).render(node)
