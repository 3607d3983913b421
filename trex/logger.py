import os, logging
from typing import Callable, Optional
from functools import partial

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.enabled = logging_enabled
        self.owns_handler = False

        if logging_enabled:
            if log_file == "-":
                # "-" logs to the console (stderr)
                handler = self._find_handler(lambda h: isinstance(h, RichHandler))
                if handler is None:
                    handler = RichHandler(console=Console(stderr=True), show_path=False)
            else:
                if log_file is None:
                    log_file = os.path.join(os.getcwd(), 'logs', 'trex_debug.log')
                path = os.path.abspath(log_file)
                handler = self._find_handler(
                    lambda h: isinstance(h, logging.FileHandler) and h.baseFilename == path
                )
                if handler is None:
                    os.makedirs(os.path.dirname(path), exist_ok=True)
                    handler = logging.FileHandler(path, encoding='utf-8')
                    handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.setLevel(logging.DEBUG)
        else:
            handler = self._find_handler(lambda h: isinstance(h, logging.NullHandler))
            if handler is None:
                handler = logging.NullHandler()

        self.handler: logging.Handler = handler
        if self.handler not in self._logger.handlers:
            self._logger.addHandler(self.handler)
            self.owns_handler = True

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _find_handler(self, predicate: Callable[[logging.Handler], bool]) -> Optional[logging.Handler]:
        """Return a handler already attached for the same target, if any."""
        return next((h for h in self._logger.handlers if predicate(h)), None)

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        if self.enabled:
            getattr(self._logger, level)(msg, exc_info=exc_info)

    def close(self) -> None:
        """Detach and close the handler, if this logger attached it."""
        if not self.owns_handler:
            return
        self._logger.removeHandler(self.handler)
        self.handler.close()
        self.owns_handler = False
