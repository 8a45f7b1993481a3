"""Pytest configuration and fixtures for gendiffs tests."""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Generator

import pytest

GIT_IDENTITY = {
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="gendiffs_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


class GitRepoHelper:
    """Helper class for git repository operations in tests."""

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path
        self.env = os.environ.copy()
        self.env.update(GIT_IDENTITY)

    def run_git(self, args: list[str]) -> subprocess.CompletedProcess:
        """Run git command in the repository."""
        return subprocess.run(
            ["git"] + args,
            cwd=self.repo_path,
            env=self.env,
            check=True,
            capture_output=True,
            text=True,
        )

    def create_file(self, path: str, content: str) -> None:
        """Create a file with content."""
        file_path = self.repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)

    def create_binary_file(self, path: str) -> None:
        """Create a binary file."""
        file_path = self.repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        binary_content = b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01'
        file_path.write_bytes(binary_content)

    def add_and_commit(self, message: str) -> str:
        """Stage everything and commit, return commit SHA."""
        self.run_git(["add", "-A"])
        self.run_git(["commit", "-m", message])
        return self.get_current_sha()

    def create_tag(self, name: str) -> None:
        self.run_git(["tag", name])

    def get_current_sha(self) -> str:
        """Get current commit SHA."""
        return self.run_git(["rev-parse", "HEAD"]).stdout.strip()

    def tracked_files(self, ref: str) -> list[str]:
        """List files tracked at ``ref``."""
        result = self.run_git(["ls-tree", "-r", "--name-only", ref])
        return [line for line in result.stdout.split("\n") if line]


def _init_repo(path: Path) -> GitRepoHelper:
    path.mkdir(parents=True)
    helper = GitRepoHelper(path)
    helper.run_git(["init"])
    helper.run_git(["config", "user.name", "Test User"])
    helper.run_git(["config", "user.email", "test@example.com"])
    helper.create_file("README.md", "# Test Repository\n")
    helper.add_and_commit("Initial commit")
    return helper


@pytest.fixture
def git_helper(temp_dir: Path) -> GitRepoHelper:
    """Create a git repository helper around a fresh repository."""
    return _init_repo(temp_dir / "test_repo")


@pytest.fixture
def upstream(temp_dir: Path) -> GitRepoHelper:
    """Upstream repository with release and pre-release tags.

    ``git tag -l`` lists: v1.0.0, v1.0.0-beta, v2.0.0, v3.0.0-rc1.
    """
    helper = _init_repo(temp_dir / "upstream")
    helper.create_file("app.js", "console.log('v1');\n")
    helper.add_and_commit("Release 1")
    helper.create_tag("v1.0.0")

    helper.create_file("app.js", "console.log('v2 beta');\n")
    helper.add_and_commit("Beta")
    helper.create_tag("v1.0.0-beta")

    helper.create_file("app.js", "console.log('v2');\n")
    helper.create_binary_file("icon.png")
    helper.add_and_commit("Release 2")
    helper.create_tag("v2.0.0")

    helper.create_file("app.js", "console.log('v3 rc');\n")
    helper.add_and_commit("RC")
    helper.create_tag("v3.0.0-rc1")
    return helper


@pytest.fixture
def workspace(temp_dir: Path) -> tuple[GitRepoHelper, GitRepoHelper]:
    """Workspace checkout with a ``diffs`` branch tracking a bare remote.

    Returns (workspace, remote). The workspace is left on another branch.
    """
    remote_path = temp_dir / "remote.git"
    remote_path.mkdir()
    remote = GitRepoHelper(remote_path)
    remote.run_git(["init", "--bare"])

    helper = _init_repo(temp_dir / "workspace")
    helper.run_git(["remote", "add", "origin", str(remote_path)])
    helper.run_git(["checkout", "-b", "diffs"])
    helper.create_file("diffs/.gitkeep", "")
    helper.add_and_commit("Start diffs branch")
    helper.run_git(["push", "-u", "origin", "diffs"])
    helper.run_git(["checkout", "-b", "work"])
    return helper, remote
