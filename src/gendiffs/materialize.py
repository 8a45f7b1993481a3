"""Writing selected diffs to disk in parallel."""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import DiffWriteError
from .planner import DiffTask
from .vcs import GitClient

logger = logging.getLogger(__name__)


def write_diff(git: GitClient, task: DiffTask) -> Path:
    """Generate one diff and write it verbatim to its destination."""
    content = git.diff_binary(task.from_tag, task.to_tag)
    try:
        task.path.parent.mkdir(parents=True, exist_ok=True)
        task.path.write_bytes(content)
    except OSError as e:
        raise DiffWriteError(str(task.path), str(e)) from e

    logger.debug(
        "Wrote diff",
        extra={"path": str(task.path), "bytes": len(content)},
    )
    return task.path


def write_diffs(
    git: GitClient,
    tasks: Sequence[DiffTask],
    max_workers: Optional[int] = None,
) -> List[Path]:
    """Write all tasks concurrently, failing on the first error.

    Tasks still queued when a sibling fails are cancelled; tasks already
    running finish and keep their files. Returns the written paths in task
    order.
    """
    if not tasks:
        return []

    workers = max_workers or len(tasks)
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="gendiffs")
    try:
        futures = [executor.submit(write_diff, git, task) for task in tasks]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)

        for future in futures:
            if future in done and future.exception() is not None:
                for pending in futures:
                    pending.cancel()
                raise future.exception()

        return [future.result() for future in futures]
    finally:
        executor.shutdown(wait=True, cancel_futures=True)
