# display/__init__.py

from .block import Block
from .engine import RenderEngine, render, repetition_label
from .errors import PlacementError
from .output import StyledOutput
from .style import (
    DEFAULT_DEFINITIONS, Color, Format, RenderDefinitions, ResolvedStyle, Style, Styles,
)


class Display:
    """
    Coordinates the display components in dependency order.

    Component Hierarchy:
    RenderDefinitions (base) → RenderEngine → StyledOutput
    """
    def __init__(self, definitions: RenderDefinitions = DEFAULT_DEFINITIONS, logger=None):
        """Initialize components in dependency order."""
        self.definitions = definitions
        self.engine = RenderEngine(definitions, logger=logger)

    def render(self, node) -> Block:
        """Render a pattern AST into a block."""
        return self.engine.render(node)

    def styled(self, block: Block, style_func) -> StyledOutput:
        """Wrap a rendered block for output through ``style_func``."""
        return StyledOutput(block, style_func)


__all__ = [
    'Display', 'Block', 'RenderEngine', 'render', 'repetition_label', 'StyledOutput',
    'PlacementError', 'Color', 'Format', 'Style', 'ResolvedStyle', 'Styles',
    'RenderDefinitions', 'DEFAULT_DEFINITIONS',
]
