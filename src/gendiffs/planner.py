"""Pair enumeration and selection of diff tasks."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence


@dataclass(frozen=True)
class DiffTask:
    """A diff to generate between two release tags."""

    from_tag: str
    to_tag: str
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


def diff_file_path(diffs_dir: Path, from_tag: str, to_tag: str) -> Path:
    """Return where the diff between two tags is stored."""
    return Path(diffs_dir) / f"{from_tag}..{to_tag}.diff"


def enumerate_tasks(tags: Sequence[str], diffs_dir: Path) -> List[DiffTask]:
    """List every ordered tag pair whose diff file does not exist yet.

    Outer loop over ``from``, inner over ``to``, both in the given order.
    An existing file is never proposed again.
    """
    tasks = []
    for from_tag in tags:
        for to_tag in tags:
            if from_tag == to_tag:
                continue
            path = diff_file_path(diffs_dir, from_tag, to_tag)
            if path.exists():
                continue
            tasks.append(DiffTask(from_tag=from_tag, to_tag=to_tag, path=path))
    return tasks


def select_tasks(tasks: Sequence[DiffTask], count: int) -> List[DiffTask]:
    """Take the first ``count`` candidates in enumeration order."""
    if count < 0:
        raise ValueError("count cannot be negative")
    return list(tasks[:count])
