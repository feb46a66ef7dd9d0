"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagescript.cli import (
    EXIT_CONFIG_ERROR,
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_SCRIPT_ERRORS,
    copy_files,
    main,
    read_script,
    write_pages,
)
from pagescript.exceptions import OutputWriteError, ScriptReadError
from pagescript.schemas import RenderedPage, RenderedScript


class TestMain:
    """Tests for main."""

    def test_writes_pages(self, script_file: Path, tmp_path: Path, capsys) -> None:
        output = tmp_path / "out"

        code = main([str(script_file), "--output", str(output)])

        assert code == EXIT_OK
        assert sorted(path.name for path in output.iterdir()) == ["1.md", "2.md", "3.md"]
        assert (output / "3.md").read_text(encoding="utf-8") == "# The End\n"
        assert "Pages: 3" in capsys.readouterr().out

    def test_check_writes_nothing(self, script_file: Path, tmp_path: Path, capsys) -> None:
        output = tmp_path / "out"

        code = main([str(script_file), "--check", "--output", str(output)])

        assert code == EXIT_OK
        assert not output.exists()
        assert "Links: 3" in capsys.readouterr().out

    def test_reports_script_errors(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "broken.txt"
        path.write_text("page a\n    link b\n        To b.\n", encoding="utf-8")

        code = main([str(path), "--check"])

        assert code == EXIT_SCRIPT_ERRORS
        err = capsys.readouterr().err
        assert "1 error" in err
        assert "line 1: The page 'a' has no title." in err

    def test_missing_script_file(self, tmp_path: Path, capsys) -> None:
        code = main([str(tmp_path / "absent.txt")])

        assert code == EXIT_IO_ERROR
        assert "Failed to read script" in capsys.readouterr().err

    def test_max_depth_option(self, script_file: Path, capsys) -> None:
        code = main([str(script_file), "--check", "--max-depth", "2"])

        assert code == EXIT_SCRIPT_ERRORS
        assert "Nesting too deep" in capsys.readouterr().err

    def test_rejects_non_positive_max_depth(self, script_file: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(script_file), "--max-depth", "0"])

    def test_renders_with_template(self, script_file: Path, tmp_path: Path) -> None:
        template = tmp_path / "page.j2"
        template.write_text("{{ page.identifier }}: {{ page.title }}", encoding="utf-8")
        output = tmp_path / "out"

        code = main([str(script_file), "--output", str(output), "--template", str(template)])

        assert code == EXIT_OK
        assert (output / "1.md").read_text(encoding="utf-8") == (
            "dungeon-entrance: The Dungeon Entrance"
        )

    def test_broken_template(self, script_file: Path, tmp_path: Path, capsys) -> None:
        template = tmp_path / "page.j2"
        template.write_text("{{ page.title", encoding="utf-8")
        output = tmp_path / "out"

        code = main([str(script_file), "--output", str(output), "--template", str(template)])

        assert code == EXIT_IO_ERROR
        assert not output.exists()
        assert "Failed to render template" in capsys.readouterr().err

    def test_copies_extra_files(self, script_file: Path, tmp_path: Path) -> None:
        style = tmp_path / "style.css"
        style.write_text("body {}", encoding="utf-8")
        logo = tmp_path / "logo.txt"
        logo.write_text("logo", encoding="utf-8")
        output = tmp_path / "out"

        code = main([str(script_file), "--output", str(output), "--copy", str(style), str(logo)])

        assert code == EXIT_OK
        assert (output / "style.css").read_text(encoding="utf-8") == "body {}"
        assert (output / "logo.txt").read_text(encoding="utf-8") == "logo"
        assert (output / "1.md").exists()

    def test_missing_copy_source(self, script_file: Path, tmp_path: Path, capsys) -> None:
        code = main(
            [str(script_file), "--output", str(tmp_path / "out"), "--copy", str(tmp_path / "nope")]
        )

        assert code == EXIT_IO_ERROR
        assert "Failed to copy" in capsys.readouterr().err

    def test_invalid_log_level(self, script_file: Path, monkeypatch, capsys) -> None:
        monkeypatch.setenv("PAGESCRIPT_LOG_LEVEL", "LOUD")

        code = main([str(script_file), "--check"])

        assert code == EXIT_CONFIG_ERROR
        assert "PAGESCRIPT_LOG_LEVEL" in capsys.readouterr().err

    def test_invalid_max_depth_setting(self, script_file: Path, monkeypatch, capsys) -> None:
        monkeypatch.setenv("PAGESCRIPT_MAX_DEPTH", "deep")

        code = main([str(script_file), "--check"])

        assert code == EXIT_CONFIG_ERROR
        assert "PAGESCRIPT_MAX_DEPTH" in capsys.readouterr().err


def test_read_script_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"page \xff\n")

    with pytest.raises(ScriptReadError):
        read_script(path)


def test_write_pages_fails_when_output_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    rendered = RenderedScript(
        summary="", page_tree="", pages=[RenderedPage(index=1, filename="1.md", content="# A\n")]
    )

    with pytest.raises(OutputWriteError):
        write_pages(rendered, blocker)


def test_copy_files_keeps_names(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("notes", encoding="utf-8")
    output = tmp_path / "out"
    output.mkdir()

    assert copy_files([source], output) == [output / "notes.txt"]
    assert (output / "notes.txt").read_text(encoding="utf-8") == "notes"
