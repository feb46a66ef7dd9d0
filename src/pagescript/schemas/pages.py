"""Validated page models, before link resolution."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """A link to another page, still naming its destination by identifier."""

    model_config = ConfigDict(frozen=True)

    destination: str
    text: str
    line: int = Field(default=0, ge=0)


class Page(BaseModel):
    """A page that passed grammar validation.

    Attributes:
        identifier: Name used by links to refer to this page.
        title: The page title.
        paragraphs: Paragraphs of prose, in document order.
        links: Outgoing links, in document order.
        line: 0-based line of the ``page`` directive.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    title: str
    paragraphs: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    line: int = Field(default=0, ge=0)
