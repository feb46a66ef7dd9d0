"""Resolve links between validated pages and assemble the script."""

from __future__ import annotations

import logging

from pagescript.errors import DanglingLink, DuplicatePage, ErrorList, LineError
from pagescript.schemas import Page, ResolvedLink, Script, ScriptPage

logger = logging.getLogger(__name__)


def assemble_script(pages: list[Page]) -> Script | ErrorList:
    """Number pages in document order and resolve every link to an index.

    Links may refer to pages declared later in the document, so resolution runs
    only once the full page list is known. Every broken reference is reported,
    not just the first.

    Pages sharing an identifier are tolerated until a link names that
    identifier; the link would be ambiguous, so each repeated declaration is
    then reported as a ``DuplicatePage``.

    Returns:
        The assembled script, or every duplicate-page and dangling-link error.
    """
    errors: list[LineError] = []
    indices: dict[str, int] = {}
    first_lines: dict[str, int] = {}
    duplicates: list[Page] = []

    for position, page in enumerate(pages):
        if page.identifier in indices:
            duplicates.append(page)
            continue
        # Display indices start at one.
        indices[page.identifier] = position + 1
        first_lines[page.identifier] = page.line

    targets = {link.destination for page in pages for link in page.links}
    for page in duplicates:
        if page.identifier in targets:
            errors.append(
                (
                    page.line,
                    DuplicatePage(identifier=page.identifier, first_line=first_lines[page.identifier]),
                )
            )
        else:
            logger.debug("Page %r is declared more than once but never linked", page.identifier)

    script_pages: list[ScriptPage] = []
    for position, page in enumerate(pages):
        links: list[ResolvedLink] = []
        for link in page.links:
            index = indices.get(link.destination)
            if index is None:
                errors.append(
                    (link.line, DanglingLink(page=page.identifier, destination=link.destination))
                )
                continue
            links.append(ResolvedLink(index=index, text=link.text))

        script_pages.append(
            ScriptPage(
                index=position + 1,
                identifier=page.identifier,
                title=page.title,
                paragraphs=list(page.paragraphs),
                links=links,
            )
        )

    if errors:
        logger.debug("Link resolution found %d error(s)", len(errors))
        return ErrorList(errors)
    return Script(pages=script_pages)
