# parser/errors.py


class ParseError(Exception):
    """Base class for every error raised while parsing a pattern."""
    pass


class UnexpectedEndOfInput(ParseError):
    """The input ended in the middle of a construct."""

    def __init__(self):
        super().__init__("Unexpected end of input")


class UnexpectedChar(ParseError):
    """An invalid character was found at a 0-based position of the input."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character {char!r} at position {position}")
