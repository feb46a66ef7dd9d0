"""Shared schemas for pagescript."""

from pagescript.schemas.directives import DirectiveKind
from pagescript.schemas.pages import Link, Page
from pagescript.schemas.rendering import RenderedPage, RenderedScript
from pagescript.schemas.script import ResolvedLink, Script, ScriptPage

__all__ = [
    "DirectiveKind",
    "Link",
    "Page",
    "RenderedPage",
    "RenderedScript",
    "ResolvedLink",
    "Script",
    "ScriptPage",
]
