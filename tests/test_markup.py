from __future__ import annotations

import pytest

from kk.errors import ParseFailure
from kk.markup import (
    BOARD_TEMPLATE,
    CARD_TEMPLATE,
    parse_board,
    parse_card,
    render_board,
    render_card,
)


def test_parse_card_template():
    card = parse_card(CARD_TEMPLATE)
    assert card.title == "Title"
    assert card.body == "Content goes here"


def test_parse_card_multiline_body_drops_trailing_newlines():
    text = "Buy milk\n=====\n\nSemi-skimmed.\n\nTwo litres.\n\n"
    card = parse_card(text)
    assert card.title == "Buy milk"
    assert card.body == "Semi-skimmed.\n\nTwo litres."


def test_parse_card_empty_body():
    assert parse_card("Just a title\n===\n").body == ""
    assert parse_card("Just a title\n===\n\n").body == ""


def test_parse_card_crlf():
    card = parse_card("Title\r\n====\r\n\r\nBody\r\n")
    assert card == ("Title", "Body")


def test_parse_card_without_rule_fails():
    with pytest.raises(ParseFailure):
        parse_card("Title\n\nBody")


def test_parse_card_text_right_after_rule_fails():
    with pytest.raises(ParseFailure):
        parse_card("Title\n===\nBody")


def test_parse_card_blank_title_fails():
    with pytest.raises(ParseFailure):
        parse_card("   \n===\n\nBody")


def test_render_card_matches_editor_format():
    assert render_card("Buy milk", "Two litres") == "Buy milk\n==========\n\nTwo litres"
    assert parse_card(render_card("Buy milk", "a\nb")) == ("Buy milk", "a\nb")


def test_parse_board_template():
    board = parse_board(BOARD_TEMPLATE)
    assert board.name == "Board Name"
    assert board.columns == ["Column #1", "Column #2", "Column #3"]


def test_parse_board_strips_names():
    board = parse_board("  Work  \n====\n\n-   Todo  \n- Done\n")
    assert board.name == "Work"
    assert board.columns == ["Todo", "Done"]


def test_parse_board_ignores_other_lines():
    board = parse_board("Work\n====\n\nSome notes\n- Todo\n* not a column\n- Done\n")
    assert board.columns == ["Todo", "Done"]


def test_parse_board_requires_columns():
    with pytest.raises(ParseFailure, match="column"):
        parse_board("Work\n====\n\n")


def test_parse_board_requires_header():
    with pytest.raises(ParseFailure):
        parse_board("- Todo\n- Done\n")


def test_render_board():
    text = render_board("Work", ["Todo", "Done"])
    assert text == "Work\n==========\n\n- Todo\n- Done\n"
    assert parse_board(text) == ("Work", ["Todo", "Done"])


def test_parse_board_requires_blank_line_after_rule():
    with pytest.raises(ParseFailure):
        parse_board("Work\n===\n- Todo\n")
