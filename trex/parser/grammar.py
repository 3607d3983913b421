# parser/grammar.py
#
# pattern    := segment ('|' segment)*
# segment    := term*
# term       := primary quantifier?
# primary    := '^' | '$' | '.' | '\' escape | '(' group | '[' class | CHAR
# quantifier := ('?' | ('*' | '+' | '{' bounds '}') '?'?)

from typing import Callable, Iterable, List, Optional, Tuple

from .choice import ChoiceMembers
from .errors import ParseError, UnexpectedChar, UnexpectedEndOfInput
from .nodes import (
    SHORTHANDS, Alternation, Any, Capturing, End, GreedyRepetition,
    LazyRepetition, Literal, Node, Sequence, Start, WordBoundary,
)

QUANTIFIERS = '?*+{'
METACHARACTERS = '.*+[]()|{}\\'
CONTROL_ESCAPES = {'n': '\n', 'r': '\r', 't': '\t'}
DIGITS = '0123456789'


class PatternParser:
    """
    Recursive-descent parser producing a pattern AST.

    The parser either returns a complete tree or raises the first
    ``ParseError`` it meets; nothing partial is ever exposed. Each nested
    group costs a few Python stack frames, so nesting deep enough to hit the
    interpreter's recursion limit is reported as a plain ``ParseError``.
    """

    def __init__(self, chars: Iterable[str], logger=None):
        self.chars: List[str] = list(chars)
        self.logger = logger
        self.pos = 0

    def parse(self) -> Node:
        """Parse the whole input and return the root node."""
        self.pos = 0
        try:
            node = self._parse_segments(in_group=False)
        except RecursionError as e:
            raise ParseError(f"Pattern nests too deeply to parse ({len(self.chars)} chars)") from e
        if self.logger:
            self.logger.debug(f"Parsed {len(self.chars)} chars into {type(node).__name__}")
        return node

    # ========= Cursor ==========

    def _next(self) -> Optional[Tuple[int, str]]:
        if self.pos >= len(self.chars):
            return None
        item = (self.pos, self.chars[self.pos])
        self.pos += 1
        return item

    def _next_if(self, predicate: Callable[[str], bool]) -> Optional[Tuple[int, str]]:
        if self.pos < len(self.chars) and predicate(self.chars[self.pos]):
            return self._next()
        return None

    def _expect_next(self) -> Tuple[int, str]:
        item = self._next()
        if item is None:
            raise UnexpectedEndOfInput()
        return item

    # ========= Grammar ==========

    def _parse_segments(self, in_group: bool) -> Node:
        """Parse ``|``-separated segments up to end of input or a closing ``)``."""
        items: List[Node] = []
        segments: List[Node] = []

        while True:
            item = self._next()
            if item is None:
                if in_group:
                    raise UnexpectedEndOfInput()
                break
            pos, ch = item
            if in_group and ch == ')':
                break
            if ch == '|':
                segments.append(Sequence(tuple(items)))
                items = []
                continue
            items.append(self._parse_term(ch, pos))

        if not segments:
            return Sequence(tuple(items))
        segments.append(Sequence(tuple(items)))
        return Alternation(tuple(segments))

    def _parse_term(self, ch: str, pos: int) -> Node:
        if ch in QUANTIFIERS:
            raise UnexpectedChar(ch, pos)
        if ch == '^':
            node = Start()
        elif ch == '$':
            node = End()
        elif ch == '.':
            node = Any()
        elif ch == '\\':
            node = self._parse_escape()
        elif ch == '(':
            node = self._parse_group()
        elif ch == '[':
            node = self._parse_choice()
        else:
            node = Literal(ch)
        return self._parse_quantifier(node)

    def _parse_quantifier(self, node: Node) -> Node:
        item = self._next_if(lambda c: c in QUANTIFIERS)
        if item is None:
            return node

        _, ch = item
        if ch == '?':
            return GreedyRepetition(node, 0, 1)
        if ch == '*':
            minimum, maximum = 0, None
        elif ch == '+':
            minimum, maximum = 1, None
        else:
            minimum, maximum = self._parse_bounds()

        if maximum is not None and maximum < minimum and self.logger:
            self.logger.warning(f"Quantifier bounds {{{minimum},{maximum}}} can never match")

        if self._next_if(lambda c: c == '?'):
            return LazyRepetition(node, minimum, maximum)
        return GreedyRepetition(node, minimum, maximum)

    def _parse_bounds(self) -> Tuple[int, Optional[int]]:
        """Parse the body of ``{m}``, ``{m,}``, ``{,n}`` or ``{m,n}`` after the ``{``."""
        quantities: List[Optional[int]] = []
        buf = ""

        while True:
            pos, ch = self._expect_next()
            if ch == '}':
                quantities.append(int(buf) if buf else None)
                if len(quantities) == 1:
                    if quantities[0] is None:
                        raise UnexpectedChar(ch, pos)
                    return quantities[0], quantities[0]
                if len(quantities) == 2:
                    return quantities[0] or 0, quantities[1]
                raise UnexpectedChar(ch, pos)
            elif ch == ',':
                quantities.append(int(buf) if buf else None)
                buf = ""
            elif ch.isspace():
                continue
            elif ch in DIGITS:
                buf += ch
            else:
                raise UnexpectedChar(ch, pos)

    def _parse_group(self) -> Node:
        capturing = True
        name = None

        if self._next_if(lambda c: c == '?'):
            if self._next_if(lambda c: c == '<'):
                name = self._parse_group_name()
            elif self._next_if(lambda c: c == ':'):
                capturing = False

        body = self._parse_segments(in_group=True)
        return Capturing(body, name) if capturing else body

    def _parse_group_name(self) -> str:
        buf = ""
        while True:
            pos, ch = self._expect_next()
            if ch == '>':
                if not buf:
                    raise UnexpectedChar(ch, pos)
                return buf
            buf += ch

    def _parse_choice(self) -> Node:
        members = ChoiceMembers()
        while True:
            pos, ch = self._expect_next()
            if ch == ']':
                return members.build(pos)
            if ch == '\\':
                members.add_node(self._parse_escape())
            elif ch == '-':
                members.add_dash()
            else:
                members.add_char(ch)

    def _parse_escape(self) -> Node:
        pos, ch = self._expect_next()
        if ch in SHORTHANDS:
            return SHORTHANDS[ch]
        if ch == 'b':
            return WordBoundary()
        if ch in CONTROL_ESCAPES:
            return Literal(CONTROL_ESCAPES[ch])
        if ch in METACHARACTERS:
            return Literal(ch)
        raise UnexpectedChar(ch, pos)


def parse(chars: Iterable[str], logger=None) -> Node:
    """Parse a pattern expression and return its AST."""
    return PatternParser(chars, logger=logger).parse()
