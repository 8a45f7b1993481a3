"""Release tag discovery and filtering."""

from typing import Iterable, List

from .config import PRERELEASE_MARKERS


def is_prerelease(tag: str, markers: Iterable[str] = PRERELEASE_MARKERS) -> bool:
    """Check if a tag carries a pre-release marker (case-sensitive substring)."""
    return any(marker in tag for marker in markers)


def filter_release_tags(
    listing: str, markers: Iterable[str] = PRERELEASE_MARKERS
) -> List[str]:
    """Turn a raw ``git tag -l`` listing into release tags, newest first.

    The listing is assumed to be sorted ascending; no version comparison is
    performed, the filtered sequence is simply reversed.
    """
    markers = tuple(markers)
    releases = [
        tag
        for tag in listing.split("\n")
        if tag and not is_prerelease(tag, markers)
    ]
    releases.reverse()
    return releases
