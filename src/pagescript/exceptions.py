"""Custom exceptions for pagescript."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagescript.errors import LineError


class PagescriptError(Exception):
    """Base exception for pagescript operations."""


class ConfigError(PagescriptError):
    """Invalid configuration value."""


class ScriptParseError(PagescriptError):
    """Script text failed to parse.

    Attributes:
        errors: Every error found, as ``(line_number, error)`` pairs with
            0-based line numbers.
    """

    def __init__(self, errors: list[LineError]) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(f"Script failed to parse with {count} {noun}")


class ScriptReadError(PagescriptError):
    """Error while reading a script file."""


class OutputWriteError(PagescriptError):
    """Error while writing rendered pages."""


class TemplateRenderError(PagescriptError):
    """Error while loading or rendering a page template."""
