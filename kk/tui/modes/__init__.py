"""Mode handlers for the board UI."""
from __future__ import annotations

# Import all mode modules to register them with the router
from . import (
    card_detail,
    confirm_deletion,
    moving_card,
    viewing_board,
    viewing_boards,
)

__all__ = [
    "card_detail",
    "confirm_deletion",
    "moving_card",
    "viewing_board",
    "viewing_boards",
]
