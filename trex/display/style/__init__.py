# display/style/__init__.py

from .definitions import (
    DEFAULT_DEFINITIONS, Color, Format, RenderDefinitions, ResolvedStyle, Style,
)
from .overlay import Styles

__all__ = [
    'Color', 'Format', 'Style', 'ResolvedStyle', 'Styles',
    'RenderDefinitions', 'DEFAULT_DEFINITIONS',
]
