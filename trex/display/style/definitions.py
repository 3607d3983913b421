# display/style/definitions.py

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Set


class Color(Enum):
    """Abstract terminal colors. ``RESET`` is the terminal's own default."""
    RESET = 'reset'
    BLACK = 'black'
    RED = 'red'
    GREEN = 'green'
    YELLOW = 'yellow'
    BLUE = 'blue'
    MAGENTA = 'magenta'
    CYAN = 'cyan'
    WHITE = 'white'
    LIGHT_BLACK = 'light_black'
    LIGHT_RED = 'light_red'
    LIGHT_GREEN = 'light_green'
    LIGHT_YELLOW = 'light_yellow'
    LIGHT_BLUE = 'light_blue'
    LIGHT_MAGENTA = 'light_magenta'
    LIGHT_CYAN = 'light_cyan'
    LIGHT_WHITE = 'light_white'


class Format(Enum):
    """Abstract text formats. ``RESET`` clears any format."""
    RESET = 'reset'
    BOLD = 'bold'
    DIM = 'dim'
    UNDERLINE = 'underline'
    REVERSE = 'reverse'
    ITALIC = 'italic'


@dataclass(frozen=True)
class ResolvedStyle:
    """Concrete style triple handed to presentation style functions."""
    foreground: Color = Color.RESET
    background: Color = Color.RESET
    format: Format = Format.RESET


@dataclass(frozen=True)
class Style:
    """
    Per-cell style with three states for each attribute.

    ``None`` means unset (no opinion, whatever lies underneath shows through),
    ``RESET`` explicitly asks for the terminal default, and any other member
    is a concrete value.
    """
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    format: Optional[Format] = None

    def apply(self, other: "Style") -> "Style":
        """Return this style with every attribute set in ``other`` overwritten."""
        return Style(
            foreground=other.foreground if other.foreground is not None else self.foreground,
            background=other.background if other.background is not None else self.background,
            format=other.format if other.format is not None else self.format,
        )

    def is_unset(self) -> bool:
        return self.foreground is None and self.background is None and self.format is None

    def resolved(self) -> ResolvedStyle:
        """Return the concrete style, treating unset attributes as ``RESET``."""
        return ResolvedStyle(
            foreground=self.foreground or Color.RESET,
            background=self.background or Color.RESET,
            format=self.format or Format.RESET,
        )


@dataclass
class RenderDefinitions:
    """
    Container for the glyphs and highlight style used by the render engine.
    Has no dependencies on the engine itself.
    """
    highlight: Style = field(
        default_factory=lambda: Style(foreground=Color.BLUE, format=Format.BOLD)
    )
    glyphs: Dict[str, str] = field(default_factory=lambda: {
        'line': '─',
        'spine': '│',
        'entry': '┤',
        'exit': '├',
        'top_branch': '┬',
        'bottom_branch': '┴',
        'cross_branch': '┼',
        'upper_left': '╭',
        'upper_right': '╮',
        'lower_left': '╰',
        'lower_right': '╯',
        'left_tee': '├',
        'right_tee': '┤',
    })
    control_glyphs: Dict[str, str] = field(default_factory=lambda: {
        '\n': '\\n',
        '\r': '\\r',
        '\t': '\\t',
    })

    def __post_init__(self):
        missing = set(DEFAULT_GLYPH_NAMES) - set(self.glyphs)
        if missing:
            raise ValueError(f"Missing glyph definitions: {', '.join(sorted(missing))}")

    @property
    def box_chars(self) -> Set[str]:
        """Every connector glyph the engine may draw."""
        return set(self.glyphs.values())

    def glyph(self, name: str) -> str:
        """Get a glyph by name."""
        return self.glyphs[name]

    def with_highlight(self, style: Style) -> "RenderDefinitions":
        """Return a copy using a different highlight style."""
        return replace(self, highlight=style, glyphs=dict(self.glyphs),
                       control_glyphs=dict(self.control_glyphs))


DEFAULT_GLYPH_NAMES = (
    'line', 'spine', 'entry', 'exit', 'top_branch', 'bottom_branch', 'cross_branch',
    'upper_left', 'upper_right', 'lower_left', 'lower_right', 'left_tee', 'right_tee',
)

DEFAULT_DEFINITIONS = RenderDefinitions()
