"""Diagnostic logging for the MCP server.

stdout carries the stdio protocol, so log records go to a file. A failing
log write must never break a tool call.
"""

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class SafeFileHandler(logging.FileHandler):
    """File handler that drops records it cannot write."""

    def emit(self, record: logging.LogRecord) -> None:
        # the lazily opened stream can fail outside StreamHandler's own guard
        try:
            super().emit(record)
        except OSError:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        pass


def configure_logging(log_file: str = "debug.log", level: str = "DEBUG") -> logging.Handler:
    """Attach a SafeFileHandler to the package logger.

    The file is opened lazily on the first record.
    """
    package_logger = logging.getLogger("amazon_seller_mcp")
    package_logger.setLevel(getattr(logging, level.upper(), logging.DEBUG))

    handler = SafeFileHandler(log_file, encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return handler


def mask(secret: Optional[str], visible: int = 10) -> str:
    """Show only the first few characters of a secret."""
    if not secret:
        return "none"
    return f"{secret[:visible]}..."
