"""Carry the selected card between columns."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..messages import Message
from ..router import register_mode
from ..state import Mode

if TYPE_CHECKING:
    from ..router import Router


@register_mode(Mode.MOVING_CARD)
def moving_card(router: Router, msg: Message) -> bool:
    if msg is Message.MOVE_CARD_LEFT:
        router.nav.move_card_left(router.store)
    elif msg is Message.MOVE_CARD_RIGHT:
        router.nav.move_card_right(router.store)
    elif msg is Message.VIEW_BOARD_MODE:
        # Moved cards sit on top of their column; put them back in id order.
        router.nav.resort_columns()
        router.set_mode(Mode.VIEWING_BOARD)
    else:
        return False
    return True
