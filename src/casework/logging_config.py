"""Logging setup shared by the CLI and the web server."""

import logging
import sys

from casework.config import settings


def configure_logging(level: str | None = None, verbose: bool = False) -> None:
    """Configure root logging from settings.log_level (or an explicit level)."""
    if verbose:
        level = "DEBUG"
    level = level or settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Quiet down noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
