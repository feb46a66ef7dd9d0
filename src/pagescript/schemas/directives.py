"""Directive keywords recognised by the script grammar."""

from __future__ import annotations

from enum import Enum


class DirectiveKind(str, Enum):
    """Enumeration of the four directive keywords."""

    PAGE = "page"
    TITLE = "title"
    LINK = "link"
    TEXT = "text"

    @classmethod
    def from_word(cls, word: str) -> DirectiveKind | None:
        """Return the directive named by ``word``, or None for prose.

        Matching is exact and case-sensitive, so ``Page`` and ``pages`` are not
        directives.
        """
        try:
            return cls(word)
        except ValueError:
            return None
