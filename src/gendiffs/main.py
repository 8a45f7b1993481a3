"""Main CLI entry point for gendiffs."""

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

from . import actions
from .config import DEFAULT_REPO_URL, GenDiffsConfig
from .errors import GenDiffsError, InvalidConfigError
from .logging_utils import configure_logging
from .materialize import write_diffs
from .planner import enumerate_tasks, select_tasks
from .serialize import ReportSerializer, RunReport
from .settings import get_count_input, get_workspace_dir
from .tags import filter_release_tags
from .vcs import GitClient, ReleaseClone

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="gendiffs",
        description="Generate pairwise release diffs and publish them to a branch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  GITHUB_WORKSPACE=$PWD gendiffs --count 10
  gendiffs --workspace /path/to/checkout --count 5 --jobs 4
  gendiffs --workspace . --count 1 --repo /path/to/upstream --json report.json
        """,
    )

    parser.add_argument(
        "--count",
        type=int,
        help="Maximum number of new diffs to generate (default: $INPUT_COUNT)",
    )
    parser.add_argument(
        "--workspace",
        help="Checkout holding the diffs branch (default: $GITHUB_WORKSPACE)",
    )
    parser.add_argument(
        "--repo",
        default=DEFAULT_REPO_URL,
        help=f"Upstream repository to diff (default: {DEFAULT_REPO_URL})",
    )
    parser.add_argument(
        "--branch",
        default="diffs",
        help="Branch that stores the generated diffs (default: diffs)",
    )
    parser.add_argument(
        "--remote",
        default="origin",
        help="Remote to push the diffs branch to (default: origin)",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        help="Maximum concurrent diff commands (default: one per selected diff)",
    )
    parser.add_argument(
        "--json",
        help="Write a JSON run report to this file",
    )
    parser.add_argument(
        "--keep-workdir",
        action="store_true",
        help="Keep the temporary clone for debugging",
    )
    parser.add_argument(
        "--keep-on-error",
        action="store_true",
        help="Keep the temporary clone on error for debugging",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    if args.count is not None and args.count <= 0:
        raise InvalidConfigError("--count must be positive")
    if args.jobs is not None and args.jobs <= 0:
        raise InvalidConfigError("--jobs must be positive")


def create_config(args: argparse.Namespace) -> GenDiffsConfig:
    """Create configuration from command line arguments and environment."""
    workspace_dir = get_workspace_dir(args.workspace)
    count = get_count_input(args.count)
    try:
        return GenDiffsConfig(
            workspace_dir=workspace_dir,
            count=count,
            repo_url=args.repo,
            diffs_branch=args.branch,
            remote=args.remote,
            max_workers=args.jobs,
            keep_workdir=args.keep_workdir,
            keep_on_error=args.keep_on_error,
        )
    except ValueError as e:
        raise InvalidConfigError(str(e)) from e


def publish(git: GitClient, config: GenDiffsConfig) -> None:
    """Commit the diffs directory and push the diffs branch."""
    git.set_identity(config.author_name, config.author_email)
    git.add(config.diffs_dirname)
    git.commit(config.commit_message)
    git.push(config.remote, config.diffs_branch)


def run(config: GenDiffsConfig) -> RunReport:
    """Generate missing diffs and publish them."""
    report = RunReport()
    workspace_git = GitClient(config.workspace_dir, config.git_env)

    with actions.group("Check out to diffs branch"):
        workspace_git.checkout(config.diffs_branch)

    with ExitStack() as stack:
        with actions.group("Cloning repository"):
            release_git = stack.enter_context(ReleaseClone(config))

        with actions.group("Fetching releases"):
            logger.info("Process %d latest releases", config.count)
            releases = filter_release_tags(
                release_git.list_tags(), config.prerelease_markers
            )
            logger.info("Found %d releases", len(releases))

        with actions.group("Generating diffs"):
            candidates = enumerate_tasks(releases, config.diffs_dir)
            report.candidates_count = len(candidates)

        if not candidates:
            logger.info("No new changes to commit")
            return report

        with actions.group("Writing to File system"):
            selected = select_tasks(candidates, config.count)
            write_diffs(release_git, selected, config.max_workers)
            report.generated = selected

    logger.info(
        "Generated %d of %d new diffs",
        len(report.generated),
        report.candidates_count,
    )
    publish(workspace_git, config)
    report.committed = True

    logger.info("Done.")
    return report


def output_result(result: dict, output_path: Optional[str]) -> None:
    """Write the JSON envelope when a report path was requested."""
    if not output_path:
        return
    json_str = ReportSerializer().to_json_string(result)
    Path(output_path).write_text(json_str, encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    configure_logging()
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)
        config = create_config(args)

        report = run(config)

        serializer = ReportSerializer(config)
        result = serializer.create_success_envelope(serializer.serialize_report(report))
        output_result(result, args.json)
        actions.set_outputs(
            {"generated": len(report.generated), "pending": report.pending_count}
        )
        return 0

    except GenDiffsError as e:
        actions.set_failed(e.message)
        result = ReportSerializer().create_error_envelope(e.code, e.message, e.details)
        output_result(result, args.json)
        return 1

    except Exception as e:
        logger.exception("Unexpected failure")
        actions.set_failed(str(e))
        result = ReportSerializer().create_error_envelope(
            "INTERNAL_ERROR",
            f"Internal error: {str(e)}",
            {"type": type(e).__name__},
        )
        output_result(result, args.json)
        return 1


if __name__ == "__main__":
    sys.exit(main())
