# parser/choice.py

from typing import List, Optional, Set

from .errors import UnexpectedChar
from .nodes import Alternation, AsciiRange, Literal, Node


class ChoiceMembers:
    """
    Collects the members of a ``[...]`` character class.

    Members have set semantics but keep first-seen order so the rendered
    class is deterministic. A ``-`` following a single-character literal
    becomes a pending range start; the next literal closes the range and the
    start literal is retracted from the members.
    """

    def __init__(self):
        self.members: List[Node] = []
        self._seen: Set[Node] = set()
        self._pending: Optional[str] = None
        self._range_start: Optional[str] = None

    def add_char(self, ch: str) -> None:
        """Add a literal character, closing a pending range if there is one."""
        if self._range_start is not None:
            start, self._range_start = self._range_start, None
            self._discard(Literal(start))
            self._add(AsciiRange(start, ch))
            self._pending = None
        else:
            self._add(Literal(ch))
            self._pending = ch

    def add_dash(self) -> None:
        """Handle an unescaped ``-``."""
        if self._range_start is None and self._pending is not None:
            self._range_start, self._pending = self._pending, None
        else:
            self.add_char('-')

    def add_node(self, node: Node) -> None:
        """Add a node produced by an escape sequence."""
        if isinstance(node, Literal):
            self.add_char(node.char)
            return
        self._close_dangling_range()
        self._add(node)
        self._pending = None

    def build(self, position: int) -> Alternation:
        """Finish the class at the ``]`` found at ``position``."""
        self._close_dangling_range()
        if not self.members:
            raise UnexpectedChar(']', position)
        return Alternation(tuple(self.members))

    def _close_dangling_range(self) -> None:
        # A range start with no literal after it is a plain dash.
        if self._range_start is not None:
            self._range_start = None
            self._add(Literal('-'))

    def _add(self, node: Node) -> None:
        if node not in self._seen:
            self._seen.add(node)
            self.members.append(node)

    def _discard(self, node: Node) -> None:
        if node in self._seen:
            self._seen.remove(node)
            self.members.remove(node)
