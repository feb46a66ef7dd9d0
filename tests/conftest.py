"""Test setup for pagescript."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


ADVENTURE = """\
# A short adventure.
page dungeon-entrance
    title
        The Dungeon Entrance
    text
        The dungeon! Eek!
        I've decided to have two paragraphs.
    link dungeon-locked-door
        Try the door.
    link stumble-off-cliff
        Flee.

page dungeon-locked-door
    title
        A Locked Door
    text
        It will not budge.
    link dungeon-entrance   # back to the start
        Go back.

page stumble-off-cliff
    title
        The End
"""


@pytest.fixture
def adventure_source() -> str:
    """A valid three-page script with forward and backward links."""
    return ADVENTURE


@pytest.fixture
def script_file(tmp_path: Path, adventure_source: str) -> Path:
    """The valid adventure written to a temporary file."""
    path = tmp_path / "adventure.txt"
    path.write_text(adventure_source, encoding="utf-8")
    return path
