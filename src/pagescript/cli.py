"""Command line entry point: parse a script and write its pages."""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from pagescript.config import PAGESCRIPT_OUTPUT_DIR, get_log_level
from pagescript.exceptions import (
    ConfigError,
    OutputWriteError,
    ScriptParseError,
    ScriptReadError,
    TemplateRenderError,
)
from pagescript.output_formatter import format_errors, format_script
from pagescript.parser import parse_script
from pagescript.schemas import RenderedScript
from pagescript.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SCRIPT_ERRORS = 1
EXIT_IO_ERROR = 2
EXIT_CONFIG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagescript",
        description="Validate a page script and write one Markdown file per page.",
    )
    parser.add_argument("script", type=Path, help="Path to the script file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=PAGESCRIPT_OUTPUT_DIR,
        help=f"Directory to write pages to (default: {PAGESCRIPT_OUTPUT_DIR})",
    )
    parser.add_argument("--check", action="store_true", help="Validate only, write nothing")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum nesting depth")
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Jinja2 template to render each page with instead of Markdown",
    )
    parser.add_argument(
        "--copy",
        type=Path,
        nargs="+",
        default=[],
        metavar="FILE",
        help="Extra files to copy into the output directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_depth is not None and args.max_depth < 1:
        parser.error("--max-depth must be at least 1")

    try:
        configure_logging("INFO" if args.verbose else get_log_level())
        source = read_script(args.script)
        script = parse_script(source, max_depth=args.max_depth)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except ScriptReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR
    except ScriptParseError as exc:
        print(f"{args.script}: {exc}", file=sys.stderr)
        print(format_errors(exc.errors), file=sys.stderr)
        return EXIT_SCRIPT_ERRORS

    try:
        rendered = format_script(script, template=args.template)
    except TemplateRenderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    if args.check:
        print(rendered.summary)
        return EXIT_OK

    try:
        write_pages(rendered, args.output)
        copy_files(args.copy, args.output)
    except OutputWriteError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    print(rendered.summary)
    return EXIT_OK


def read_script(path: Path) -> str:
    """Read a script file as UTF-8.

    Raises:
        ScriptReadError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptReadError(f"Failed to read script {path}: {exc}") from exc


def write_pages(rendered: RenderedScript, output_dir: Path) -> list[Path]:
    """Write every rendered page into ``output_dir``, creating it if needed.

    Raises:
        OutputWriteError: If the directory or a page cannot be written.
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Failed to create output directory {output_dir}: {exc}") from exc

    written: list[Path] = []
    for page in rendered.pages:
        path = output_dir / page.filename
        try:
            path.write_text(page.content, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Failed to write {path}: {exc}") from exc
        logger.info("Wrote %s", path)
        written.append(path)
    return written


def copy_files(sources: list[Path], output_dir: Path) -> list[Path]:
    """Copy ``sources`` into ``output_dir`` under their own names.

    Raises:
        OutputWriteError: If a file cannot be copied.
    """
    copied: list[Path] = []
    for source in sources:
        destination = output_dir / source.name
        try:
            shutil.copy2(source, destination)
        except OSError as exc:
            raise OutputWriteError(f"Failed to copy {source} to {destination}: {exc}") from exc
        logger.info("Copied %s", destination)
        copied.append(destination)
    return copied
