"""Messages that drive the board UI."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Message(Enum):
    QUIT = "quit"
    NAVIGATE_LEFT = "navigate_left"
    NAVIGATE_RIGHT = "navigate_right"
    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    NEW_CARD = "new_card"
    EDIT_CARD = "edit_card"
    DELETE_CARD = "delete_card"
    MOVE_CARD_MODE = "move_card_mode"
    MOVE_CARD_LEFT = "move_card_left"
    MOVE_CARD_RIGHT = "move_card_right"
    VIEW_BOARD_MODE = "view_board_mode"
    VIEW_BOARDS_MODE = "view_boards_mode"
    VIEW_CARD_DETAIL_MODE = "view_card_detail_mode"
    NEW_BOARD = "new_board"
    EDIT_BOARD = "edit_board"
    CONFIRM_CHOICE = "confirm_choice"
    CLEAR_ERROR = "clear_error"


@dataclass(frozen=True)
class SetError:
    """Show `text` in the modeline; None clears it."""

    text: str | None


Msg = Union[Message, SetError]
