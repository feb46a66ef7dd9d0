"""Tests for link resolution and script assembly."""

from __future__ import annotations

from pagescript.assembly import assemble_script
from pagescript.errors import DanglingLink, DuplicatePage, ErrorList
from pagescript.schemas import Link, Page, ResolvedLink, Script


def _page(identifier: str, line: int, *links: Link) -> Page:
    return Page(identifier=identifier, title=identifier.title(), links=list(links), line=line)


class TestAssembleScript:
    """Tests for assemble_script."""

    def test_empty_page_list(self) -> None:
        assert assemble_script([]) == Script(pages=[])

    def test_indices_follow_document_order(self) -> None:
        script = assemble_script([_page("a", 0), _page("b", 3), _page("c", 6)])

        assert [(page.index, page.identifier) for page in script.pages] == [
            (1, "a"),
            (2, "b"),
            (3, "c"),
        ]

    def test_resolves_forward_and_backward_links(self) -> None:
        pages = [
            _page("a", 0, Link(destination="b", text="Forward", line=2)),
            _page("b", 4, Link(destination="a", text="Back", line=6)),
        ]

        script = assemble_script(pages)

        assert script.pages[0].links == [ResolvedLink(index=2, text="Forward")]
        assert script.pages[1].links == [ResolvedLink(index=1, text="Back")]

    def test_self_link(self) -> None:
        script = assemble_script([_page("loop", 0, Link(destination="loop", text="Again", line=2))])

        assert script.pages[0].links == [ResolvedLink(index=1, text="Again")]

    def test_reports_dangling_link_naming_both_pages(self) -> None:
        pages = [_page("a", 0, Link(destination="b", text="Nowhere", line=2)), _page("c", 4)]

        result = assemble_script(pages)

        assert isinstance(result, ErrorList)
        assert result == [(2, DanglingLink(page="a", destination="b"))]

    def test_reports_every_dangling_link(self) -> None:
        pages = [
            _page(
                "a",
                0,
                Link(destination="missing", text="One", line=2),
                Link(destination="b", text="Fine", line=4),
            ),
            _page("b", 6, Link(destination="gone", text="Two", line=8)),
        ]

        assert assemble_script(pages) == [
            (2, DanglingLink(page="a", destination="missing")),
            (8, DanglingLink(page="b", destination="gone")),
        ]

    def test_unlinked_duplicate_identifiers_are_accepted(self) -> None:
        pages = [_page("a", 0), _page("b", 3), _page("a", 6)]

        script = assemble_script(pages)

        assert isinstance(script, Script)
        assert [(page.index, page.identifier) for page in script.pages] == [
            (1, "a"),
            (2, "b"),
            (3, "a"),
        ]

    def test_reports_every_linked_duplicate(self) -> None:
        pages = [
            _page("a", 0, Link(destination="a", text="Again", line=2)),
            _page("a", 4),
            _page("b", 7),
            _page("a", 9),
            _page("b", 12),
        ]

        assert assemble_script(pages) == [
            (4, DuplicatePage(identifier="a", first_line=0)),
            (9, DuplicatePage(identifier="a", first_line=0)),
        ]

    def test_link_to_duplicated_identifier_resolves_to_first(self) -> None:
        """The duplicate is still an error, but links do not also dangle."""
        pages = [_page("a", 0), _page("b", 3, Link(destination="a", text="A", line=5)), _page("a", 7)]

        assert assemble_script(pages) == [(7, DuplicatePage(identifier="a", first_line=0))]
