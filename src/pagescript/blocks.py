"""Build a tree of blocks from indent-levelled lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, TypeAlias, Union

from pagescript.config import get_max_depth
from pagescript.errors import ErrorList, LineError, NestingTooDeep, UnexpectedIndentation
from pagescript.lines import Line
from pagescript.schemas.directives import DirectiveKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextBlock:
    """A line of prose."""

    line: int
    text: str


@dataclass(frozen=True)
class DirectiveBlock:
    """A directive together with every block indented beneath it."""

    line: int
    kind: DirectiveKind
    argument: str | None = None
    children: list[Block] = field(default_factory=list)


Block: TypeAlias = Union[TextBlock, DirectiveBlock]


class _LineCursor:
    """Peekable iterator over ``(line_number, Line)`` pairs."""

    def __init__(self, lines: Iterable[tuple[int, Line]]) -> None:
        self._lines: Iterator[tuple[int, Line]] = iter(lines)
        self._pending: tuple[int, Line] | None = None

    def peek(self) -> tuple[int, Line] | None:
        if self._pending is None:
            self._pending = next(self._lines, None)
        return self._pending

    def next_if_indented(self, indent: int) -> tuple[int, Line] | None:
        """Consume the next line if it is indented at least ``indent`` levels."""
        upcoming = self.peek()
        if upcoming is None or upcoming[1].indent < indent:
            return None
        self._pending = None
        return upcoming

    def skip_indented(self, indent: int) -> None:
        while self.next_if_indented(indent) is not None:
            pass


def build_blocks(
    lines: Iterable[tuple[int, Line]],
    *,
    max_depth: int | None = None,
) -> list[Block] | ErrorList:
    """Nest ``lines`` by indentation.

    Args:
        lines: Tokenized lines, in document order.
        max_depth: Maximum number of nesting levels. Defaults to
            the ``PAGESCRIPT_MAX_DEPTH`` setting.

    Returns:
        The top-level blocks, or every structural error found. Each malformed
        region is reported once and skipped, so independent faults elsewhere
        in the input are still found.
    """
    limit = get_max_depth() if max_depth is None else max_depth
    cursor = _LineCursor(lines)
    errors: list[LineError] = []

    blocks = _parse_indented(0, cursor, errors, limit)

    if errors:
        logger.debug("Block builder found %d structural error(s)", len(errors))
        return ErrorList(errors)
    return blocks


def _parse_indented(
    indent: int,
    cursor: _LineCursor,
    errors: list[LineError],
    limit: int,
) -> list[Block]:
    blocks: list[Block] = []

    while (item := cursor.next_if_indented(indent)) is not None:
        number, line = item

        if line.indent > indent:
            # Everything below an over-indented line is unreliable; report it
            # once and drop the whole region.
            errors.append((number, UnexpectedIndentation(expected=indent, found=line.indent)))
            cursor.skip_indented(indent)
            break

        if not line.is_directive:
            blocks.append(TextBlock(line=number, text=line.text or ""))
            continue

        if indent + 1 >= limit:
            upcoming = cursor.peek()
            if upcoming is not None and upcoming[1].indent > indent:
                errors.append((upcoming[0], NestingTooDeep(limit=limit)))
                cursor.skip_indented(indent + 1)
            blocks.append(DirectiveBlock(line=number, kind=line.directive, argument=line.argument))
            continue

        children = _parse_indented(indent + 1, cursor, errors, limit)
        blocks.append(
            DirectiveBlock(
                line=number,
                kind=line.directive,
                argument=line.argument,
                children=children,
            )
        )

    return blocks
