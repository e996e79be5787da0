"""Per-mode key bindings and the hints shown in the modeline."""
from __future__ import annotations

from .messages import Message
from .state import Mode

ENTER = ("c-m", "c-j")
ESCAPE = ("escape",)

# Bound in every mode.
GLOBAL_KEYS: dict[str, Message] = {
    "c-c": Message.QUIT,
}


def _bind(*pairs: tuple[tuple[str, ...] | str, Message]) -> dict[str, Message]:
    out: dict[str, Message] = {}
    for keys, msg in pairs:
        for key in (keys,) if isinstance(keys, str) else keys:
            out[key] = msg
    return out


KEYMAP: dict[Mode, dict[str, Message]] = {
    Mode.VIEWING_BOARD: _bind(
        (("h", "left"), Message.NAVIGATE_LEFT),
        (("j", "down"), Message.NAVIGATE_DOWN),
        (("k", "up"), Message.NAVIGATE_UP),
        (("l", "right"), Message.NAVIGATE_RIGHT),
        ("q", Message.QUIT),
        ("m", Message.MOVE_CARD_MODE),
        ("n", Message.NEW_CARD),
        ("e", Message.EDIT_CARD),
        ("d", Message.DELETE_CARD),
        ("b", Message.VIEW_BOARDS_MODE),
        (ENTER, Message.VIEW_CARD_DETAIL_MODE),
    ),
    Mode.MOVING_CARD: _bind(
        (("h", "left"), Message.MOVE_CARD_LEFT),
        (("l", "right"), Message.MOVE_CARD_RIGHT),
        ("q", Message.QUIT),
        (("m",) + ENTER + ESCAPE, Message.VIEW_BOARD_MODE),
    ),
    Mode.CONFIRM_CARD_DELETION: _bind(
        (("h", "left"), Message.NAVIGATE_LEFT),
        (("l", "right"), Message.NAVIGATE_RIGHT),
        (ENTER, Message.CONFIRM_CHOICE),
        (ESCAPE, Message.VIEW_BOARD_MODE),
        ("q", Message.QUIT),
    ),
    Mode.VIEWING_CARD_DETAIL: _bind(
        (ENTER + ESCAPE, Message.VIEW_BOARD_MODE),
        ("e", Message.EDIT_CARD),
        ("q", Message.QUIT),
    ),
    Mode.VIEWING_BOARDS: _bind(
        (("j", "down"), Message.NAVIGATE_DOWN),
        (("k", "up"), Message.NAVIGATE_UP),
        ("n", Message.NEW_BOARD),
        ("e", Message.EDIT_BOARD),
        ("q", Message.QUIT),
        (ENTER, Message.VIEW_BOARD_MODE),
    ),
}

HINTS: dict[Mode, list[tuple[str, str]]] = {
    Mode.VIEWING_BOARD: [
        ("h/j/k/l", "navigate"),
        ("n", "new card"),
        ("e", "edit"),
        ("m", "move"),
        ("d", "delete"),
        ("enter", "view"),
        ("b", "boards"),
        ("q", "quit"),
    ],
    Mode.MOVING_CARD: [
        ("h/l", "move card"),
        ("m/enter/esc", "done"),
        ("q", "quit"),
    ],
    Mode.CONFIRM_CARD_DELETION: [
        ("h/l", "choose"),
        ("enter", "confirm"),
        ("esc", "cancel"),
    ],
    Mode.VIEWING_CARD_DETAIL: [
        ("e", "edit"),
        ("enter/esc", "back"),
        ("q", "quit"),
    ],
    Mode.VIEWING_BOARDS: [
        ("j/k", "navigate"),
        ("n", "new board"),
        ("e", "edit board"),
        ("enter", "open"),
        ("q", "quit"),
    ],
}


def message_for_key(mode: Mode, key: str) -> Message | None:
    """Translate a key name into a message for the current mode."""
    if key in GLOBAL_KEYS:
        return GLOBAL_KEYS[key]
    return KEYMAP.get(mode, {}).get(key)
