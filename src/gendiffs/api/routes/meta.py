"""Meta endpoints for the gendiffs API."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter

from ... import __version__
from ...errors import CommandFailedError
from ...settings import get_diffs_dir
from ...vcs import GitClient
from ..models import HealthResponse, VersionResponse

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


def _get_git_version() -> Optional[str]:
    """Return the installed git version if available."""
    try:
        return GitClient(Path.cwd()).version()
    except CommandFailedError as exc:
        logger.debug("git --version check failed", exc_info=exc)
    return None


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    git_version = _get_git_version()
    diffs_dir_exists = get_diffs_dir().is_dir()
    logger.info(
        "Health check invoked",
        extra={"git_available": git_version is not None, "git_version": git_version},
    )
    return HealthResponse(
        status="healthy",
        version=__version__,
        git_available=git_version is not None,
        git_version=git_version,
        diffs_dir_exists=diffs_dir_exists,
    )


@router.get("/version", response_model=VersionResponse)
def version_info() -> VersionResponse:
    """Version information endpoint."""
    git_version = _get_git_version()
    logger.info("Version endpoint invoked", extra={"git_version": git_version})
    return VersionResponse(
        version=__version__,
        api_version="v1",
        git_version=git_version,
    )


@router.get("/", include_in_schema=False)
def root() -> dict:
    """Root endpoint providing basic API metadata."""
    logger.debug("Root endpoint served")
    return {
        "name": "gendiffs API",
        "version": __version__,
        "description": "Browse generated release diffs",
        "endpoints": {
            "diffs": "GET /diffs - List generated diffs",
            "diff": "GET /diffs/{from_tag}/{to_tag} - Raw diff between two tags",
            "health": "GET /health - Health check",
            "version": "GET /version - Version information",
            "docs": "GET /docs - API documentation",
        },
    }
