"""Typed error values reported by the parsing pipeline.

Parsing never raises for malformed input. Each phase returns either its value
or an ``ErrorList``: a non-empty list of ``(line_number, error)`` pairs built
from the classes below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

from pagescript.schemas.directives import DirectiveKind

UNNAMED_PAGE = "{unnamed}"


class ErrorCategory(str, Enum):
    """Phase that detected an error."""

    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    GRAMMAR = "grammar"
    REFERENCE = "reference"


@dataclass(frozen=True)
class ScriptError(ABC):
    """Base class for every error value."""

    category: ClassVar[ErrorCategory]

    @property
    @abstractmethod
    def message(self) -> str:
        """Human readable description, without a line number."""

    def __str__(self) -> str:
        return self.message


# Lexical


@dataclass(frozen=True)
class InvalidIndentation(ScriptError):
    count: int

    category: ClassVar[ErrorCategory] = ErrorCategory.LEXICAL

    @property
    def message(self) -> str:
        return f"Invalid indentation, expected a multiple of four spaces, but saw {self.count}."


# Structural


@dataclass(frozen=True)
class UnexpectedIndentation(ScriptError):
    expected: int
    found: int

    category: ClassVar[ErrorCategory] = ErrorCategory.STRUCTURAL

    @property
    def message(self) -> str:
        return f"Unexpected indentation, expected level {self.expected}, but saw level {self.found}."


@dataclass(frozen=True)
class NestingTooDeep(ScriptError):
    limit: int

    category: ClassVar[ErrorCategory] = ErrorCategory.STRUCTURAL

    @property
    def message(self) -> str:
        return f"Nesting too deep, at most {self.limit} levels are allowed."


# Grammar


@dataclass(frozen=True)
class UnexpectedArgument(ScriptError):
    directive: DirectiveKind

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The '{self.directive.value}' directive does not take an argument."


@dataclass(frozen=True)
class MissingArgument(ScriptError):
    directive: DirectiveKind

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The '{self.directive.value}' directive requires an argument."


@dataclass(frozen=True)
class MissingText(ScriptError):
    directive: DirectiveKind

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The '{self.directive.value}' directive requires indented text beneath it."


@dataclass(frozen=True)
class ExcessiveChildCount(ScriptError):
    directive: DirectiveKind

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The '{self.directive.value}' directive takes a single line of text."


@dataclass(frozen=True)
class UnexpectedChildDirective(ScriptError):
    directive: DirectiveKind

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The '{self.directive.value}' directive may only contain text, not other directives."


@dataclass(frozen=True)
class PageMissingTitle(ScriptError):
    page: str

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The page {self.page!r} has no title."


@dataclass(frozen=True)
class ExcessivePageTitles(ScriptError):
    page: str

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The page {self.page!r} has more than one title."


@dataclass(frozen=True)
class UnexpectedText(ScriptError):
    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return "Text is not allowed outside of a page."


@dataclass(frozen=True)
class UnexpectedTopLevelDirective(ScriptError):
    found: DirectiveKind

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"Expected a 'page' directive at the top level, but saw '{self.found.value}'."


@dataclass(frozen=True)
class NestedPage(ScriptError):
    parent: str
    child: str

    category: ClassVar[ErrorCategory] = ErrorCategory.GRAMMAR

    @property
    def message(self) -> str:
        return f"The page {self.child!r} is nested inside the page {self.parent!r}."


# Reference


@dataclass(frozen=True)
class DanglingLink(ScriptError):
    page: str
    destination: str

    category: ClassVar[ErrorCategory] = ErrorCategory.REFERENCE

    @property
    def message(self) -> str:
        return f"The page {self.page!r} links to {self.destination!r}, which does not exist."


@dataclass(frozen=True)
class DuplicatePage(ScriptError):
    identifier: str
    first_line: int

    category: ClassVar[ErrorCategory] = ErrorCategory.REFERENCE

    @property
    def message(self) -> str:
        return (
            f"The page {self.identifier!r} is already defined on line {self.first_line + 1}, "
            "so links to it are ambiguous."
        )


LineError: TypeAlias = tuple[int, ScriptError]


class ErrorList(list):
    """The failure result of a parsing phase.

    A plain list of ``(line_number, error)`` pairs, typed so callers can tell a
    failed phase from a successful one whose value is also a list.
    """


def format_error(line: int, error: ScriptError) -> str:
    """Render an error for humans, with a 1-based line number."""
    return f"line {line + 1}: {error.message}"


def sort_errors(errors: list[LineError]) -> ErrorList:
    """Order errors by line, keeping discovery order within a line."""
    return ErrorList(sorted(errors, key=lambda item: item[0]))


def is_error_list(result: object) -> bool:
    """Return True if a phase result is a failure."""
    return isinstance(result, ErrorList)
