"""Fully resolved script models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResolvedLink(BaseModel):
    """A link whose destination has been resolved to a 1-based page index."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1)
    text: str


class ScriptPage(BaseModel):
    """A page of an assembled script."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1)
    identifier: str
    title: str
    paragraphs: list[str] = Field(default_factory=list)
    links: list[ResolvedLink] = Field(default_factory=list)


class Script(BaseModel):
    """Every page of a script in document order.

    A page's display index is its position plus one.
    """

    model_config = ConfigDict(frozen=True)

    pages: list[ScriptPage] = Field(default_factory=list)

    def page(self, identifier: str) -> ScriptPage | None:
        """Return the page named ``identifier``, if any."""
        for page in self.pages:
            if page.identifier == identifier:
                return page
        return None

    def page_at(self, index: int) -> ScriptPage:
        """Return the page with the given 1-based display index."""
        if index < 1 or index > len(self.pages):
            raise IndexError(f"No page with index {index}")
        return self.pages[index - 1]
