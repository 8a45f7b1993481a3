"""Version control system operations for gendiffs."""

import logging
import re
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from .config import GenDiffsConfig
from .errors import CommandFailedError

logger = logging.getLogger(__name__)

# Keep output free of color codes and line-ending rewrites
_GIT_PREFIX = [
    "git",
    "-c",
    "core.autocrlf=false",
    "-c",
    "color.ui=false",
]


class GitClient:
    """Git operations bound to one working directory."""

    def __init__(self, cwd: Path, env: Optional[Dict[str, str]] = None):
        """Initialize with the directory every command runs in."""
        self.cwd = Path(cwd)
        self.env = env

    def _run_git(self, args: List[str], text: bool = True) -> Union[str, bytes]:
        """Run a git command and return its stdout.

        Raises CommandFailedError carrying the captured stderr on any
        non-zero exit status.
        """
        cmd = _GIT_PREFIX + args
        logger.info("git %s", " ".join(args), extra={"cwd": str(self.cwd)})
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                env=self.env,
                capture_output=True,
                text=text,
                check=False,
            )
        except OSError as e:
            raise CommandFailedError(cmd, None, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr
            if isinstance(stderr, bytes):
                stderr = stderr.decode("utf-8", errors="replace")
            raise CommandFailedError(cmd, result.returncode, stderr)

        return result.stdout

    def version(self) -> str:
        """Return the installed git version, e.g. ``2.43.0``."""
        output = self._run_git(["version"])
        match = re.search(r"git version (\d+\.\d+(?:\.\d+)?)", output)
        return match.group(1) if match else output.strip()

    def checkout(self, branch: str) -> None:
        self._run_git(["checkout", branch])

    def clone(self, url: str, dest: Path) -> None:
        self._run_git(["clone", url, str(dest)])

    def list_tags(self) -> str:
        """Return the raw newline-separated ``git tag -l`` listing."""
        return self._run_git(["tag", "-l"])

    def diff_binary(self, from_tag: str, to_tag: str) -> bytes:
        """Return the binary-safe diff between two tags, byte for byte."""
        return self._run_git(
            ["diff", "--binary", f"tags/{from_tag}..tags/{to_tag}"],
            text=False,
        )

    def set_identity(self, name: str, email: str) -> None:
        """Set the commit author for this repository."""
        self._run_git(["config", "user.email", email])
        self._run_git(["config", "user.name", name])

    def add(self, path: str) -> None:
        self._run_git(["add", "-A", path])

    def commit(self, message: str) -> None:
        self._run_git(["commit", "-m", message])

    def push(self, remote: str, branch: str) -> None:
        self._run_git(["push", remote, branch])


class ReleaseClone:
    """Temporary clone of the upstream repository."""

    def __init__(self, config: GenDiffsConfig):
        """Initialize with configuration."""
        self.config = config
        self.workdir: Optional[Path] = None

    def __enter__(self) -> GitClient:
        """Clone into a fresh temporary directory and return its client."""
        self.workdir = Path(tempfile.mkdtemp(prefix="gendiffs_"))
        try:
            GitClient(self.workdir, self.config.git_env).clone(
                self.config.repo_url, self.workdir
            )
        except BaseException:
            self._cleanup(failed=True)
            raise
        return GitClient(self.workdir, self.config.git_env)

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self._cleanup(failed=exc_type is not None)

    def _cleanup(self, failed: bool) -> None:
        if not self.workdir or not self.workdir.exists():
            return
        if self.config.keep_workdir or (failed and self.config.keep_on_error):
            logger.info("Keeping clone", extra={"workdir": str(self.workdir)})
            return
        shutil.rmtree(self.workdir, ignore_errors=True)
