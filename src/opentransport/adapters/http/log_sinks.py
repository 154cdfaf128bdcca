"""Per-client debug and error logging sinks.

Each client owns two loggers that are created outside the ``logging``
module registry, so enabling output on one client never affects another
client or the application's own logging tree. Output is discarded until
``enable`` is called.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _new_logger(name: str, level: int) -> logging.Logger:
    """Create an unregistered logger that discards everything."""
    sink = logging.Logger(name, level)
    sink.propagate = False
    sink.addHandler(logging.NullHandler())
    return sink


def _stream_handler(stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


class ClientLogSinks:
    """Debug and error loggers shared by every call of one client."""

    def __init__(self, name: str = "opentransport") -> None:
        """Initialize both sinks in the disabled state.

        Args:
            name: Logger name prefix shown in the log records.
        """
        self.debug = _new_logger(f"{name}.debug", logging.DEBUG)
        self.error = _new_logger(f"{name}.error", logging.WARNING)
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self, stream: TextIO | None = None) -> None:
        """Route both sinks to ``stream``.

        Without a stream, debug records go to stdout and error records to
        stderr. Calling this again replaces the previous handlers.

        Args:
            stream: Writable text stream receiving all records (optional).
        """
        debug_stream = stream if stream is not None else sys.stdout
        error_stream = stream if stream is not None else sys.stderr
        self._replace_handler(self.debug, _stream_handler(debug_stream))
        self._replace_handler(self.error, _stream_handler(error_stream))
        self._enabled = True

    def disable(self) -> None:
        """Discard all records again."""
        self._replace_handler(self.debug, logging.NullHandler())
        self._replace_handler(self.error, logging.NullHandler())
        self._enabled = False

    @staticmethod
    def _replace_handler(sink: logging.Logger, handler: logging.Handler) -> None:
        for existing in list(sink.handlers):
            sink.removeHandler(existing)
            existing.close()
        sink.addHandler(handler)
