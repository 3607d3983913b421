# __init__.py

from .logger import Logger
from .pattern import Pattern
from .parser import ParseError, UnexpectedChar, UnexpectedEndOfInput, parse
from .display import Block, Color, Format, ResolvedStyle, Style, StyledOutput, render

__all__ = [
    "Pattern", "Logger", "parse", "render",
    "ParseError", "UnexpectedChar", "UnexpectedEndOfInput",
    "Block", "Color", "Format", "Style", "ResolvedStyle", "StyledOutput",
]
