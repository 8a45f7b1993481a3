"""Error definitions and handling for gendiffs."""

from typing import Any, Dict, List, Optional


class GenDiffsError(Exception):
    """Base exception for gendiffs errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class WorkspaceMissingError(GenDiffsError):
    """The workspace directory was not provided."""

    def __init__(self, variable: str = "GITHUB_WORKSPACE"):
        super().__init__(
            code="WORKSPACE_MISSING",
            message=f"Needs a `{variable}` environment variable",
            details={"variable": variable},
        )


class InvalidConfigError(GenDiffsError):
    """A configuration value is missing or malformed."""

    def __init__(self, reason: str):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Invalid configuration: {reason}",
            details={"reason": reason},
        )


class CommandFailedError(GenDiffsError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: List[str], returncode: Optional[int], stderr: str):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            code="COMMAND_FAILED",
            message=stderr.strip() or f"{' '.join(command)} exited with status {returncode}",
            details={
                "command": self.command,
                "returncode": returncode,
                "stderr": stderr,
            },
        )


class DiffWriteError(GenDiffsError):
    """A generated diff could not be written to disk."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="DIFF_WRITE_FAILED",
            message=f"Failed to write {path}: {reason}",
            details={"path": path, "reason": reason},
        )
