"""Split script text into classified, indent-levelled lines."""

from __future__ import annotations

from dataclasses import dataclass

from pagescript.errors import ErrorList, InvalidIndentation, LineError
from pagescript.schemas.directives import DirectiveKind

INDENT_WIDTH = 4
COMMENT_CHAR = "#"


@dataclass(frozen=True)
class Line:
    """A non-blank line of a script.

    Directive lines carry ``directive`` and an optional ``argument``; prose
    lines carry ``text`` instead.
    """

    indent: int
    directive: DirectiveKind | None = None
    argument: str | None = None
    text: str | None = None

    @property
    def is_directive(self) -> bool:
        return self.directive is not None

    @classmethod
    def new_text(cls, indent: int, text: str) -> Line:
        return cls(indent=indent, text=text)

    @classmethod
    def new_directive(
        cls, indent: int, directive: DirectiveKind, argument: str | None = None
    ) -> Line:
        return cls(indent=indent, directive=directive, argument=argument)


def tokenize(source: str) -> list[tuple[int, Line]] | ErrorList:
    """Classify every line of ``source``.

    Returns:
        ``(line_number, Line)`` pairs for every non-blank line, or every
        ``InvalidIndentation`` error in the input if there is at least one.
        Line numbers are 0-based.
    """
    lines: list[tuple[int, Line]] = []
    errors: list[LineError] = []

    for number, raw in enumerate(_physical_lines(source)):
        result = parse_line(raw)
        if result is None:
            continue
        if isinstance(result, InvalidIndentation):
            errors.append((number, result))
        else:
            lines.append((number, result))

    if errors:
        return ErrorList(errors)
    return lines


def parse_line(raw: str) -> Line | InvalidIndentation | None:
    """Classify one physical line.

    Returns None for blank and comment-only lines, whose indentation is never
    checked.
    """
    count = len(raw) - len(raw.lstrip(" "))
    content = strip_comment(raw[count:]).strip()
    if not content:
        return None

    if count % INDENT_WIDTH:
        return InvalidIndentation(count=count)
    indent = count // INDENT_WIDTH

    word, *rest = content.split(maxsplit=1)
    directive = DirectiveKind.from_word(word)
    if directive is None:
        return Line.new_text(indent, content)
    argument = rest[0].strip() if rest else None
    return Line.new_directive(indent, directive, argument or None)


def strip_comment(text: str) -> str:
    """Return the part of ``text`` before the first comment character."""
    before, _, _ = text.partition(COMMENT_CHAR)
    return before


def _physical_lines(source: str) -> list[str]:
    lines = source.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]
