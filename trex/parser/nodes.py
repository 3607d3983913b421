# parser/nodes.py

from dataclasses import dataclass, fields
from typing import Optional, Tuple


@dataclass(frozen=True)
class Node:
    """Base of the pattern AST. Every variant is an immutable, hashable dataclass."""

    def children(self) -> Tuple["Node", ...]:
        """Return the direct child nodes, in visual order."""
        return ()

    def describe(self, indent: int = 0) -> str:
        """Return an indented outline of this subtree, one node per line."""
        attrs = [
            f"{f.name}={getattr(self, f.name)!r}"
            for f in fields(self)
            if not isinstance(getattr(self, f.name), (Node, tuple))
        ]
        line = " " * indent + type(self).__name__
        if attrs:
            line += f"({', '.join(attrs)})"
        return "\n".join([line] + [child.describe(indent + 2) for child in self.children()])


@dataclass(frozen=True)
class Literal(Node):
    """A single literal character."""
    char: str


@dataclass(frozen=True)
class Start(Node):
    pass


@dataclass(frozen=True)
class End(Node):
    pass


@dataclass(frozen=True)
class Any(Node):
    pass


@dataclass(frozen=True)
class WordBoundary(Node):
    pass


@dataclass(frozen=True)
class Alphanumeric(Node):
    pass


@dataclass(frozen=True)
class NotAlphanumeric(Node):
    pass


@dataclass(frozen=True)
class Digit(Node):
    pass


@dataclass(frozen=True)
class NotDigit(Node):
    pass


@dataclass(frozen=True)
class Whitespace(Node):
    pass


@dataclass(frozen=True)
class NotWhitespace(Node):
    pass


@dataclass(frozen=True)
class AsciiRange(Node):
    """Inclusive character range, only produced inside character classes."""
    low: str
    high: str


@dataclass(frozen=True)
class Sequence(Node):
    """Concatenation. An empty sequence matches the empty string."""
    items: Tuple[Node, ...] = ()

    def children(self) -> Tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class Alternation(Node):
    """Either/or branching. Order is the top-to-bottom order of the diagram."""
    options: Tuple[Node, ...]

    def __post_init__(self):
        if not self.options:
            raise ValueError("Alternation requires at least one alternative")

    def children(self) -> Tuple[Node, ...]:
        return self.options


@dataclass(frozen=True)
class Repetition(Node):
    """
    A quantified sub-pattern.

    ``maximum`` is None when the repetition is unbounded. Inverted bounds
    such as ``{5,2}`` are kept as written.
    """
    child: Node
    minimum: int
    maximum: Optional[int] = None

    def children(self) -> Tuple[Node, ...]:
        return (self.child,)


@dataclass(frozen=True)
class GreedyRepetition(Repetition):
    pass


@dataclass(frozen=True)
class LazyRepetition(Repetition):
    pass


@dataclass(frozen=True)
class Capturing(Node):
    """Capturing group, optionally named. Non-capturing groups have no wrapper."""
    child: Node
    name: Optional[str] = None

    def children(self) -> Tuple[Node, ...]:
        return (self.child,)


SHORTHANDS = {
    'w': Alphanumeric(),
    'W': NotAlphanumeric(),
    's': Whitespace(),
    'S': NotWhitespace(),
    'd': Digit(),
    'D': NotDigit(),
}

__all__ = [
    'Node', 'Literal', 'Start', 'End', 'Any', 'WordBoundary',
    'Alphanumeric', 'NotAlphanumeric', 'Digit', 'NotDigit',
    'Whitespace', 'NotWhitespace', 'AsciiRange', 'Sequence', 'Alternation',
    'Repetition', 'GreedyRepetition', 'LazyRepetition', 'Capturing', 'SHORTHANDS',
]
