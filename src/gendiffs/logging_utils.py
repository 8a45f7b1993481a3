"""Logging configuration utilities for gendiffs."""

import logging
import os
import sys
from typing import Optional, TextIO

_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)
# The Actions runner timestamps every line itself
_ACTIONS_LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Configure application-wide logging once.

    Records go to stderr so stdout only carries workflow commands.
    """
    if logging.getLogger().handlers:
        return

    log_level = level or os.getenv("LOG_LEVEL", "INFO")
    in_actions = os.getenv("GITHUB_ACTIONS") == "true"
    logging.basicConfig(
        level=log_level.upper(),
        format=_ACTIONS_LOG_FORMAT if in_actions else _LOG_FORMAT,
        stream=stream or sys.stderr,
    )
