"""pagescript: parse indentation-structured page scripts."""

from pagescript.errors import ErrorList, LineError, ScriptError, format_error
from pagescript.exceptions import (
    ConfigError,
    OutputWriteError,
    PagescriptError,
    ScriptParseError,
    ScriptReadError,
    TemplateRenderError,
)
from pagescript.output_formatter import format_errors, format_script, render_template
from pagescript.parser import parse, parse_script
from pagescript.schemas import (
    DirectiveKind,
    Link,
    Page,
    RenderedPage,
    RenderedScript,
    ResolvedLink,
    Script,
    ScriptPage,
)

__all__ = [
    "ConfigError",
    "DirectiveKind",
    "ErrorList",
    "LineError",
    "Link",
    "OutputWriteError",
    "Page",
    "PagescriptError",
    "RenderedPage",
    "RenderedScript",
    "ResolvedLink",
    "Script",
    "ScriptError",
    "ScriptPage",
    "ScriptParseError",
    "ScriptReadError",
    "TemplateRenderError",
    "format_error",
    "format_errors",
    "format_script",
    "parse",
    "parse_script",
    "render_template",
]
