"""Configuration management for gendiffs."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

DEFAULT_REPO_URL = "https://github.com/mendix/native-template.git"
DEFAULT_AUTHOR_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"
PRERELEASE_MARKERS = ("beta", "alpha", "rc", "master")


@dataclass(frozen=True)
class GenDiffsConfig:
    """Configuration for one diff generation run."""

    # Required parameters
    workspace_dir: Path
    count: int

    # Upstream repository
    repo_url: str = DEFAULT_REPO_URL
    prerelease_markers: Tuple[str, ...] = PRERELEASE_MARKERS

    # Publishing
    diffs_branch: str = "diffs"
    remote: str = "origin"
    diffs_dirname: str = "diffs"
    commit_message: str = "Update diffs"
    author_name: str = "github-action"
    author_email: str = DEFAULT_AUTHOR_EMAIL

    # None runs every selected diff at once
    max_workers: Optional[int] = None

    # Workspace options
    keep_workdir: bool = False
    keep_on_error: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.count < 1:
            raise ValueError("count must be positive")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be positive")
        if not self.repo_url:
            raise ValueError("repo_url cannot be empty")
        if not self.diffs_branch:
            raise ValueError("diffs_branch cannot be empty")

    @property
    def diffs_dir(self) -> Path:
        """Directory in the workspace that holds generated diffs."""
        return Path(self.workspace_dir) / self.diffs_dirname

    @property
    def git_env(self) -> Dict[str, str]:
        """Get Git environment variables for non-interactive, stable output."""
        env = os.environ.copy()
        env.update(
            {
                "LC_ALL": "C",
                "GIT_TERMINAL_PROMPT": "0",
                "GIT_ASKPASS": "echo",
                "SSH_ASKPASS": "echo",
                "GCM_INTERACTIVE": "never",
            }
        )
        return env

    def to_provenance_dict(self) -> Dict[str, Any]:
        """Convert config to provenance dictionary for the run report."""
        return {
            "repo_url": self.repo_url,
            "diffs_branch": self.diffs_branch,
            "remote": self.remote,
            "diffs_dir": str(self.diffs_dir),
            "count": self.count,
            "max_workers": self.max_workers,
            "prerelease_markers": list(self.prerelease_markers),
        }
