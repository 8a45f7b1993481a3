"""GitHub Actions workflow commands.

Groups and error annotations are plain lines on stdout that the runner
interprets; see "Workflow commands for GitHub Actions".
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional, TextIO

logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str = "", stream: Optional[TextIO] = None) -> None:
    """Write a ``::command::message`` line to stdout."""
    out = stream or sys.stdout
    out.write(f"::{command}::{_escape_data(message)}\n")
    out.flush()


@contextmanager
def group(title: str, stream: Optional[TextIO] = None) -> Iterator[None]:
    """Fold everything logged inside the block under ``title``."""
    issue_command("group", title, stream)
    try:
        yield
    finally:
        issue_command("endgroup", "", stream)


def error(message: str, stream: Optional[TextIO] = None) -> None:
    """Emit an error annotation."""
    issue_command("error", message, stream)


def set_failed(message: str, stream: Optional[TextIO] = None) -> None:
    """Log the failure and annotate the run with it."""
    logger.error(message)
    error(message, stream)


def set_outputs(outputs: Mapping[str, object]) -> None:
    """Append step outputs to ``$GITHUB_OUTPUT`` when running in Actions."""
    github_output = os.getenv("GITHUB_OUTPUT")
    if not github_output:
        return
    with open(github_output, "a", encoding="utf-8") as f:
        for key, value in outputs.items():
            f.write(f"{key}={value}\n")
