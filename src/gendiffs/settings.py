"""Application-wide settings and environment loading."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidConfigError, WorkspaceMissingError

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")

WORKSPACE_VARIABLE = "GITHUB_WORKSPACE"
COUNT_VARIABLE = "INPUT_COUNT"
DIFFS_DIR_VARIABLE = "GENDIFFS_DIFFS_DIR"


def get_workspace_dir(override: Optional[str] = None) -> Path:
    """Return the workspace directory, preferring an explicit override."""
    workspace = override or os.getenv(WORKSPACE_VARIABLE)
    if not workspace:
        raise WorkspaceMissingError(WORKSPACE_VARIABLE)
    return Path(workspace)


def get_count_input(override: Optional[int] = None) -> int:
    """Return the per-run diff count from the CLI or the action input."""
    if override is not None:
        return override

    raw = os.getenv(COUNT_VARIABLE, "").strip()
    if not raw:
        raise InvalidConfigError(f"`count` is required (set --count or {COUNT_VARIABLE})")
    try:
        return int(raw, 10)
    except ValueError as e:
        raise InvalidConfigError(f"`count` must be an integer, got {raw!r}") from e


def get_diffs_dir() -> Path:
    """Return the directory served by the diff browser API."""
    explicit = os.getenv(DIFFS_DIR_VARIABLE)
    if explicit:
        return Path(explicit)

    workspace = os.getenv(WORKSPACE_VARIABLE)
    if workspace:
        return Path(workspace) / "diffs"

    logger.debug("No diffs directory configured, using ./diffs")
    return Path.cwd() / "diffs"
