"""Validate a block tree against the page grammar."""

from __future__ import annotations

import logging

from pagescript.blocks import Block, DirectiveBlock, TextBlock
from pagescript.errors import (
    UNNAMED_PAGE,
    ErrorList,
    ExcessiveChildCount,
    ExcessivePageTitles,
    LineError,
    MissingArgument,
    MissingText,
    NestedPage,
    PageMissingTitle,
    UnexpectedArgument,
    UnexpectedChildDirective,
    UnexpectedText,
    UnexpectedTopLevelDirective,
    is_error_list,
)
from pagescript.schemas import DirectiveKind, Link, Page

logger = logging.getLogger(__name__)


def resolve_pages(blocks: list[Block]) -> list[Page] | ErrorList:
    """Turn top-level blocks into validated pages.

    Every top-level block must be a ``page`` directive. Errors from every page
    are collected before returning, so one bad page does not hide another.

    Returns:
        The pages in document order, or every error found.
    """
    pages: list[Page] = []
    errors: list[LineError] = []

    for block in blocks:
        if isinstance(block, TextBlock):
            errors.append((block.line, UnexpectedText()))
            continue
        if block.kind is not DirectiveKind.PAGE:
            errors.append((block.line, UnexpectedTopLevelDirective(found=block.kind)))
            continue

        result = resolve_page(block)
        if is_error_list(result):
            errors.extend(result)
        else:
            pages.append(result)

    if errors:
        logger.debug("Page resolver found %d error(s)", len(errors))
        return ErrorList(errors)
    return pages


def resolve_page(block: DirectiveBlock) -> Page | ErrorList:
    """Validate a single ``page`` directive and everything beneath it.

    A page with any error anywhere in its subtree yields only errors; no
    partially valid page is returned.
    """
    errors: list[LineError] = []

    identifier = block.argument
    if identifier is None:
        errors.append((block.line, MissingArgument(directive=DirectiveKind.PAGE)))
        identifier = UNNAMED_PAGE

    titles: list[str] = []
    paragraphs: list[str] = []
    links: list[Link] = []

    for child in block.children:
        if isinstance(child, TextBlock):
            errors.append((child.line, UnexpectedText()))
        elif child.kind is DirectiveKind.TITLE:
            title = _resolve_title(child, errors)
            if title is not None:
                titles.append(title)
        elif child.kind is DirectiveKind.TEXT:
            paragraphs.extend(_resolve_text(child, errors))
        elif child.kind is DirectiveKind.LINK:
            link = _resolve_link(child, errors)
            if link is not None:
                links.append(link)
        else:
            # Nested pages are always rejected; faults inside them are
            # reported as well.
            errors.append(
                (child.line, NestedPage(parent=identifier, child=child.argument or UNNAMED_PAGE))
            )
            nested = resolve_page(child)
            if is_error_list(nested):
                errors.extend(nested)

    # Only titles that validated count; a broken title is reported on its own
    # line and leaves the page untitled.
    if not titles:
        errors.append((block.line, PageMissingTitle(page=identifier)))
    elif len(titles) > 1:
        errors.append((block.line, ExcessivePageTitles(page=identifier)))

    if errors:
        return ErrorList(errors)

    return Page(
        identifier=identifier,
        title=titles[0],
        paragraphs=paragraphs,
        links=links,
        line=block.line,
    )


def _resolve_title(block: DirectiveBlock, errors: list[LineError]) -> str | None:
    if block.argument is not None:
        errors.append((block.line, UnexpectedArgument(directive=DirectiveKind.TITLE)))
    return _single_text_child(block, errors)


def _resolve_text(block: DirectiveBlock, errors: list[LineError]) -> list[str]:
    if block.argument is not None:
        errors.append((block.line, UnexpectedArgument(directive=DirectiveKind.TEXT)))
    if not block.children:
        errors.append((block.line, MissingText(directive=DirectiveKind.TEXT)))

    paragraphs: list[str] = []
    for child in block.children:
        if isinstance(child, TextBlock):
            paragraphs.append(child.text)
        else:
            errors.append((child.line, UnexpectedChildDirective(directive=DirectiveKind.TEXT)))
    return paragraphs


def _resolve_link(block: DirectiveBlock, errors: list[LineError]) -> Link | None:
    if block.argument is None:
        errors.append((block.line, MissingArgument(directive=DirectiveKind.LINK)))

    text = _single_text_child(block, errors)
    if text is None or block.argument is None:
        return None
    return Link(destination=block.argument, text=text, line=block.line)


def _single_text_child(block: DirectiveBlock, errors: list[LineError]) -> str | None:
    """Return the text of the one prose line beneath ``block``."""
    if not block.children:
        errors.append((block.line, MissingText(directive=block.kind)))
        return None
    if len(block.children) > 1:
        excess = block.children[1]
        errors.append((excess.line, ExcessiveChildCount(directive=block.kind)))
        return None

    child = block.children[0]
    if isinstance(child, DirectiveBlock):
        errors.append((child.line, UnexpectedChildDirective(directive=block.kind)))
        return None
    return child.text
