"""Logging helpers shared by the engine, data and game layers."""

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the ``wordfall`` logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger("wordfall")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger namespaced under ``wordfall``."""
    return logging.getLogger(name or "wordfall")
