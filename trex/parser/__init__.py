# parser/__init__.py

from .errors import ParseError, UnexpectedChar, UnexpectedEndOfInput
from .grammar import PatternParser, parse
from .nodes import *  # noqa: F401,F403
from .nodes import __all__ as _node_names

__all__ = [
    'PatternParser', 'parse',
    'ParseError', 'UnexpectedChar', 'UnexpectedEndOfInput',
] + _node_names
