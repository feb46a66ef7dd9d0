"""Parse script text into a fully resolved Script."""

from __future__ import annotations

import logging

from pagescript.assembly import assemble_script
from pagescript.blocks import build_blocks
from pagescript.errors import ErrorList, LineError, is_error_list, sort_errors
from pagescript.exceptions import ScriptParseError
from pagescript.lines import tokenize
from pagescript.pages import resolve_pages
from pagescript.schemas import Script

logger = logging.getLogger(__name__)


def parse(source: str, *, max_depth: int | None = None) -> Script | ErrorList:
    """Parse ``source`` into a Script.

    The phases run in order (tokenize, build blocks, resolve pages, resolve
    links) and each one runs only if the previous one found no errors. Within a
    phase every fault is collected.

    Args:
        source: The script text.
        max_depth: Optional override for the nesting depth limit.

    Returns:
        The Script, or an ``ErrorList`` of ``(line_number, error)`` pairs
        ordered by 0-based line number.

    Raises:
        ConfigError: If ``max_depth`` is not given and
            ``PAGESCRIPT_MAX_DEPTH`` is invalid.
    """
    lines = tokenize(source)
    if is_error_list(lines):
        return _report("tokenize", lines)

    blocks = build_blocks(lines, max_depth=max_depth)
    if is_error_list(blocks):
        return _report("build_blocks", blocks)

    pages = resolve_pages(blocks)
    if is_error_list(pages):
        return _report("resolve_pages", pages)

    script = assemble_script(pages)
    if is_error_list(script):
        return _report("assemble_script", script)

    logger.debug("Parsed script with %d page(s)", len(script.pages))
    return script


def parse_script(source: str, *, max_depth: int | None = None) -> Script:
    """Parse ``source``, raising instead of returning errors.

    Raises:
        ScriptParseError: If the script has any error. The exception's
            ``errors`` attribute holds the same list ``parse`` would return.
    """
    result = parse(source, max_depth=max_depth)
    if is_error_list(result):
        raise ScriptParseError(result)
    return result


def _report(phase: str, errors: list[LineError]) -> ErrorList:
    logger.debug("Phase %s failed with %d error(s)", phase, len(errors))
    return sort_errors(errors)
