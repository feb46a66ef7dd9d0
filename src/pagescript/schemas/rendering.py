"""Rendered output models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderedPage(BaseModel):
    """A single page rendered to Markdown."""

    index: int = Field(..., ge=1)
    filename: str
    content: str


class RenderedScript(BaseModel):
    """Final rendering output."""

    summary: str
    page_tree: str
    pages: list[RenderedPage] = Field(default_factory=list)
