"""Pydantic models for the gendiffs API responses."""

from typing import Optional

from pydantic import BaseModel, Field


class DiffEntry(BaseModel):
    """A generated diff file."""

    name: str = Field(..., examples=["v8.0.0..v9.0.0.diff"])
    from_tag: str = Field(..., examples=["v8.0.0"])
    to_tag: str = Field(..., examples=["v9.0.0"])
    size: int = Field(..., description="File size in bytes", ge=0)


class DiffListResponse(BaseModel):
    """Response model for the diff listing endpoint."""

    count: int = Field(..., ge=0)
    diffs: list[DiffEntry] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])
    git_available: bool = Field(..., examples=[True])
    git_version: Optional[str] = Field(None, examples=["2.43.0"])
    diffs_dir_exists: bool = Field(..., examples=[True])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    git_version: Optional[str] = Field(None, examples=["2.43.0"])
