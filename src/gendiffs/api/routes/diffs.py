"""Diff browsing routes for the gendiffs API."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from ...settings import get_diffs_dir
from ..models import DiffListResponse
from ..service import DiffStore

router = APIRouter(tags=["diffs"])

logger = logging.getLogger(__name__)


def get_store() -> DiffStore:
    """Dependency returning the store for the configured diffs directory."""
    return DiffStore(get_diffs_dir())


@router.get("/diffs", response_model=DiffListResponse)
def list_diffs(store: DiffStore = Depends(get_store)) -> DiffListResponse:
    """List generated diffs."""
    entries = store.list_diffs()
    logger.info("Listed diffs", extra={"count": len(entries)})
    return DiffListResponse(count=len(entries), diffs=entries)


@router.get("/diffs/{from_tag}/{to_tag}")
def get_diff(from_tag: str, to_tag: str, store: DiffStore = Depends(get_store)) -> Response:
    """Return the raw diff between two release tags."""
    content = store.read_diff(from_tag, to_tag)
    if content is None:
        raise HTTPException(
            status_code=404,
            detail={
                "ok": False,
                "error": {
                    "code": "DIFF_NOT_FOUND",
                    "message": f"No diff generated for {from_tag}..{to_tag}",
                },
            },
        )
    return Response(content=content, media_type="text/x-diff")
