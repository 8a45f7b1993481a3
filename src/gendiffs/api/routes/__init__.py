"""API route registration for gendiffs."""

from fastapi import APIRouter

from . import diffs, meta

router = APIRouter()
router.include_router(meta.router)
router.include_router(diffs.router)

__all__ = ["router"]
