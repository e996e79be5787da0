"""Text format exchanged with the external editor.

A card is a title line, a line of '=' and a blank line, then the body:

    Buy milk
    ==========

    Semi-skimmed, two litres.

A board uses the same header followed by one `- column` line per column.
"""
from __future__ import annotations

import re
from typing import NamedTuple

from .errors import ParseFailure

RULE = "=========="

CARD_TEMPLATE = f"Title\n{RULE}\n\nContent goes here"
BOARD_TEMPLATE = f"Board Name\n{RULE}\n\n- Column #1\n- Column #2\n- Column #3"

_CARD_RE = re.compile(r"^(?P<title>[^=\n]+)\n=+[ \t]*\n(?:\n(?P<body>.*)|\Z)", re.MULTILINE | re.DOTALL)
_BOARD_HEADER_RE = re.compile(r"^(?P<name>[^=\n]+)\n=+[ \t]*\n\n", re.MULTILINE)
_COLUMN_RE = re.compile(r"^- (?P<column>[^\n]+)$", re.MULTILINE)


class CardText(NamedTuple):
    title: str
    body: str


class BoardText(NamedTuple):
    name: str
    columns: list[str]


def _normalize(text: str) -> str:
    return text.replace("\r\n", "\n")


def render_card(title: str, body: str) -> str:
    return f"{title}\n{RULE}\n\n{body}"


def render_board(name: str, columns: list[str]) -> str:
    return f"{name}\n{RULE}\n\n" + "".join(f"- {c}\n" for c in columns)


def parse_card(text: str) -> CardText:
    """Parse editor output into a card title and body.

    Trailing newlines (most editors add one) are dropped from the body.
    """
    m = _CARD_RE.search(_normalize(text))
    if m is None:
        raise ParseFailure("card text needs a title line followed by a line of '='")
    title = m.group("title").strip()
    if not title:
        raise ParseFailure("card title is empty")
    body = (m.group("body") or "").rstrip("\n")
    return CardText(title=title, body=body)


def parse_board(text: str) -> BoardText:
    """Parse editor output into a board name and its column names."""
    text = _normalize(text)
    m = _BOARD_HEADER_RE.search(text)
    if m is None:
        raise ParseFailure("board text needs a name line followed by a line of '='")
    name = m.group("name").strip()
    if not name:
        raise ParseFailure("board name is empty")

    columns = [c.strip() for c in _COLUMN_RE.findall(text, m.end())]
    columns = [c for c in columns if c]
    if not columns:
        raise ParseFailure("board text needs at least one '- column' line")
    return BoardText(name=name, columns=columns)
