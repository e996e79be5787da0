"""Yes/no prompt before a card is deleted."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..messages import Message
from ..router import register_mode
from ..state import Confirmation, Mode

if TYPE_CHECKING:
    from ..router import Router


@register_mode(Mode.CONFIRM_CARD_DELETION)
def confirm_deletion(router: Router, msg: Message) -> bool:
    state = router.state
    if msg in (Message.NAVIGATE_LEFT, Message.NAVIGATE_RIGHT):
        state.confirmation = state.confirmation.toggled()
    elif msg is Message.CONFIRM_CHOICE:
        choice = state.confirmation
        state.confirmation = Confirmation.NO
        router.set_mode(Mode.VIEWING_BOARD)
        if choice is Confirmation.YES:
            router.nav.delete_selected_card(router.store)
    elif msg is Message.VIEW_BOARD_MODE:
        state.confirmation = Confirmation.NO
        router.set_mode(Mode.VIEWING_BOARD)
    else:
        return False
    return True
