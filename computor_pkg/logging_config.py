"""Logging setup for the solver pipeline.

Every module logs under the ``computor.<module>`` tree (``computor.parser``,
``computor.reducer``, ``computor.solver`` ...). Each pipeline stage reports
its intermediate mapping at DEBUG, and the Newton square root warns when it
hits its iteration cap. The CLI wires ``--log-level`` and ``--log-file``
into setup_logging(); library callers get no handlers until they opt in.
"""

import logging
import sys
from datetime import datetime
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``computor`` logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs (if None, logs to stderr only)

    Returns:
        The ``computor`` root logger; calling again replaces its handlers
    """
    logger = logging.getLogger("computor")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Repeated CLI runs in one process must not stack handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "computor") -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(f"computor.{name}")
