# pattern.py

from typing import Optional

from .logger import Logger
from .parser import Node, parse
from .display import Block, Display, StyledOutput
from .display.output import StyleFunc


class Pattern:
    """
    Main entry point that assembles the parser and the display.

    A Pattern is parsed once on construction and can then be rendered as a
    plain diagram (``str(pattern)``) or through a style function.
    """

    def __init__(self, text: str,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Parse ``text`` into a pattern AST.

        Args:
            text: The pattern expression.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for the console. Patterns
                logging to the same target share one handler.

        Raises:
            ParseError: If ``text`` is not a valid pattern.
        """
        self.text = text
        self._block: Optional[Block] = None
        self._init_components(logging_enabled, log_file)

    def _init_components(self, logging_enabled: bool, log_file: Optional[str]) -> None:
        self.logger = Logger(__name__, logging_enabled, log_file)
        try:
            self.display = Display(logger=self.logger)
            self.ast: Node = parse(self.text, logger=self.logger)
            self.logger.debug(f"Parsed pattern {self.text!r}")
        except Exception as e:
            self.logger.error(f"Parse error in {self.text!r}: {e}")
            self.logger.close()
            raise

    @classmethod
    def parse(cls, text: str) -> "Pattern":
        """Alternate constructor mirroring ``str`` parsing."""
        return cls(text)

    def render(self) -> Block:
        """Return the rendered diagram, computing it on first use."""
        if self._block is None:
            self._block = self.display.render(self.ast)
        return self._block

    def with_style(self, style_func: StyleFunc) -> StyledOutput:
        """Return the diagram wrapped for output through ``style_func``."""
        return self.display.styled(self.render(), style_func)

    def __str__(self):
        return self.render().as_str()

    def __eq__(self, other):
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.ast == other.ast

    def __hash__(self):
        return hash(self.ast)

    def __repr__(self):
        return f"Pattern({self.text!r})"
