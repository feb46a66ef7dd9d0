"""Format a Script into summary, page tree, and rendered pages."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable

from jinja2 import DebugUndefined, Environment, FileSystemLoader, TemplateError

from pagescript.config import PAGESCRIPT_PAGE_EXTENSION
from pagescript.errors import LineError, format_error
from pagescript.exceptions import TemplateRenderError
from pagescript.schemas import RenderedPage, RenderedScript, Script, ScriptPage

_LINK_TEXT_SPECIAL = re.compile(r"([\\\[\]()])")


def format_script(
    script: Script,
    *,
    extension: str = PAGESCRIPT_PAGE_EXTENSION,
    template: Path | None = None,
) -> RenderedScript:
    """Create summary, page tree, and one document per page.

    Pages are Markdown unless ``template`` names a Jinja2 template, which is
    then rendered once per page.

    Raises:
        TemplateRenderError: If the template cannot be loaded or rendered.
    """
    tree = "Pages:\n" + _create_page_tree(script)
    if template is None:
        pages = [_render_page(page, extension=extension) for page in script.pages]
    else:
        pages = render_template(script, template, extension=extension)

    summary_lines = [
        f"Pages: {len(script.pages)}",
        f"Paragraphs: {sum(len(page.paragraphs) for page in script.pages)}",
        f"Links: {count_links(script.pages)}",
    ]
    unreachable = find_unreachable_pages(script)
    if unreachable:
        summary_lines.append(f"Unreachable: {', '.join(unreachable)}")

    return RenderedScript(summary="\n".join(summary_lines), page_tree=tree, pages=pages)


def format_errors(errors: Iterable[LineError]) -> str:
    """Render errors one per line, with 1-based line numbers."""
    return "\n".join(format_error(line, error) for line, error in errors)


def count_links(pages: Iterable[ScriptPage]) -> int:
    """Count outgoing links across all pages."""
    return sum(len(page.links) for page in pages)


def find_unreachable_pages(script: Script) -> list[str]:
    """Return identifiers of pages no link leads to, other than the first page."""
    targets = {link.index for page in script.pages for link in page.links}
    return [page.identifier for page in script.pages[1:] if page.index not in targets]


def page_filename(index: int, extension: str = PAGESCRIPT_PAGE_EXTENSION) -> str:
    return f"{index}{extension}"


def escape_link_text(text: str) -> str:
    """Backslash-escape characters that would end a Markdown link label early."""
    return _LINK_TEXT_SPECIAL.sub(r"\\\1", text)


def render_template(
    script: Script,
    template: Path,
    *,
    extension: str = PAGESCRIPT_PAGE_EXTENSION,
) -> list[RenderedPage]:
    """Render every page of ``script`` through a Jinja2 template file.

    The template sees ``page`` (index, identifier, title, paragraphs, links and
    filename; each link has index, text and filename) plus ``script.pages``,
    every page's context in order.

    Raises:
        TemplateRenderError: If the template cannot be loaded or rendered.
    """
    env = Environment(loader=FileSystemLoader(str(template.parent)), undefined=DebugUndefined)
    contexts = [_page_context(page, extension) for page in script.pages]
    try:
        j2tmp = env.get_template(template.name)
        rendered = [
            RenderedPage(
                index=context["index"],
                filename=context["filename"],
                content=j2tmp.render(page=context, script={"pages": contexts}),
            )
            for context in contexts
        ]
    except (TemplateError, OSError, UnicodeDecodeError) as exc:
        raise TemplateRenderError(f"Failed to render template {template}: {exc}") from exc
    return rendered


def _page_context(page: ScriptPage, extension: str) -> dict[str, Any]:
    return {
        "index": page.index,
        "identifier": page.identifier,
        "title": page.title,
        "paragraphs": list(page.paragraphs),
        "filename": page_filename(page.index, extension),
        "links": [
            {
                "index": link.index,
                "text": link.text,
                "filename": page_filename(link.index, extension),
            }
            for link in page.links
        ],
    }


def _render_page(page: ScriptPage, *, extension: str) -> RenderedPage:
    blocks: list[str] = [f"# {page.title}"]
    blocks.extend(paragraph.strip() for paragraph in page.paragraphs)
    if page.links:
        blocks.append(
            "\n".join(
                f"- [{escape_link_text(link.text)}]({page_filename(link.index, extension)})"
                for link in page.links
            )
        )
    content = "\n\n".join(block for block in blocks if block).strip() + "\n"
    return RenderedPage(
        index=page.index,
        filename=page_filename(page.index, extension),
        content=content,
    )


def _create_page_tree(script: Script) -> str:
    lines: list[str] = []
    for page in script.pages:
        lines.append(f"{page.index}. {page.identifier} ({page.title})")
        for link in page.links:
            target = script.page_at(link.index)
            lines.append(" " * 4 + f"-> {link.index}. {target.identifier}: {link.text}")
    return "\n".join(lines)
