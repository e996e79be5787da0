from __future__ import annotations

from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys

from kk.tui.keymap import HINTS, KEYMAP, message_for_key
from kk.tui.keys import KeyReader, key_name
from kk.tui.messages import Message
from kk.tui.state import Mode


def test_key_name():
    assert key_name(Keys.Left) == "left"
    assert key_name(Keys.Escape) == "escape"
    assert key_name(Keys.ControlM) == "c-m"
    assert key_name("h") == "h"


def test_viewing_board_keys():
    mode = Mode.VIEWING_BOARD
    assert message_for_key(mode, "h") is Message.NAVIGATE_LEFT
    assert message_for_key(mode, "left") is Message.NAVIGATE_LEFT
    assert message_for_key(mode, "j") is Message.NAVIGATE_DOWN
    assert message_for_key(mode, "k") is Message.NAVIGATE_UP
    assert message_for_key(mode, "right") is Message.NAVIGATE_RIGHT
    assert message_for_key(mode, "n") is Message.NEW_CARD
    assert message_for_key(mode, "d") is Message.DELETE_CARD
    assert message_for_key(mode, "b") is Message.VIEW_BOARDS_MODE
    assert message_for_key(mode, "c-m") is Message.VIEW_CARD_DETAIL_MODE


def test_same_key_means_different_things_per_mode():
    assert message_for_key(Mode.VIEWING_BOARD, "h") is Message.NAVIGATE_LEFT
    assert message_for_key(Mode.MOVING_CARD, "h") is Message.MOVE_CARD_LEFT
    assert message_for_key(Mode.VIEWING_BOARDS, "e") is Message.EDIT_BOARD
    assert message_for_key(Mode.VIEWING_BOARD, "e") is Message.EDIT_CARD
    assert message_for_key(Mode.MOVING_CARD, "escape") is Message.VIEW_BOARD_MODE
    assert message_for_key(Mode.CONFIRM_CARD_DELETION, "c-m") is Message.CONFIRM_CHOICE


def test_unbound_keys():
    assert message_for_key(Mode.VIEWING_BOARDS, "h") is None
    assert message_for_key(Mode.VIEWING_CARD_DETAIL, "d") is None


def test_ctrl_c_quits_everywhere():
    for mode in Mode:
        assert message_for_key(mode, "c-c") is Message.QUIT


def test_every_mode_has_bindings_and_hints():
    for mode in Mode:
        assert KEYMAP[mode]
        assert HINTS[mode]


def test_key_reader_parses_pipe_input():
    with create_pipe_input() as inp:
        reader = KeyReader(inp)
        assert reader.read(0) == []

        inp.send_text("h\x1b[D\r")
        assert reader.read(1.0) == ["h", "left", "c-m"]


def test_key_reader_lone_escape():
    with create_pipe_input() as inp:
        reader = KeyReader(inp)
        inp.send_text("\x1b")
        assert reader.read(1.0) == ["escape"]
