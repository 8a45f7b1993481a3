"""Service layer for the gendiffs API - reads the diffs directory."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..planner import diff_file_path
from .models import DiffEntry

logger = logging.getLogger(__name__)

_SUFFIX = ".diff"
_SEPARATOR = ".."


def parse_diff_name(name: str) -> Optional[Tuple[str, str]]:
    """Split ``<from>..<to>.diff`` into its tags, or None if it is not one."""
    if not name.endswith(_SUFFIX):
        return None
    stem = name[: -len(_SUFFIX)]
    from_tag, sep, to_tag = stem.partition(_SEPARATOR)
    if not sep or not from_tag or not to_tag:
        return None
    return from_tag, to_tag


class DiffStore:
    """Read access to a directory of generated diffs."""

    def __init__(self, diffs_dir: Path):
        self.diffs_dir = Path(diffs_dir)

    def exists(self) -> bool:
        return self.diffs_dir.is_dir()

    def list_diffs(self) -> List[DiffEntry]:
        """List diff files sorted by name."""
        if not self.exists():
            logger.debug("Diffs directory missing", extra={"path": str(self.diffs_dir)})
            return []

        entries = []
        for path in sorted(self.diffs_dir.iterdir()):
            if not path.is_file():
                continue
            tags = parse_diff_name(path.name)
            if tags is None:
                continue
            entries.append(
                DiffEntry(
                    name=path.name,
                    from_tag=tags[0],
                    to_tag=tags[1],
                    size=path.stat().st_size,
                )
            )
        return entries

    def read_diff(self, from_tag: str, to_tag: str) -> Optional[bytes]:
        """Return the raw diff between two tags, or None if not generated."""
        path = diff_file_path(self.diffs_dir, from_tag, to_tag)
        try:
            resolved = path.resolve()
            resolved.relative_to(self.diffs_dir.resolve())
        except ValueError:
            logger.warning("Rejected path outside diffs dir", extra={"path": str(path)})
            return None
        if not resolved.is_file():
            return None
        return resolved.read_bytes()
