from __future__ import annotations

"""Basic logging configuration."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging, and the package logger in case a server already set up root."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("statefacts").setLevel(level)
