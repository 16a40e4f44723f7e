"""Logging configuration for the knowledge base CLI."""

import logging
import sys


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Send log records at level and above to stderr."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Add stderr handler if not already present
    if not any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in root_logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root_logger.addHandler(handler)

    logging.getLogger("knowledge").setLevel(level)
