"""Single card popup."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..messages import Message
from ..router import register_mode
from ..state import Mode
from .viewing_board import edit_selected_card

if TYPE_CHECKING:
    from ..router import Router


@register_mode(Mode.VIEWING_CARD_DETAIL)
def card_detail(router: Router, msg: Message) -> bool:
    if msg is Message.EDIT_CARD:
        edit_selected_card(router)
    elif msg is Message.VIEW_BOARD_MODE:
        router.set_mode(Mode.VIEWING_BOARD)
    else:
        return False
    return True
