"""Main board view: navigate, create, edit and pick cards for other modes."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ...markup import CARD_TEMPLATE, parse_card, render_card
from ..messages import Message
from ..router import register_mode
from ..state import Confirmation, Mode

if TYPE_CHECKING:
    from ..router import Router


def new_card(router: Router) -> None:
    board = router.nav.current_board()
    parsed = parse_card(router.edit(CARD_TEMPLATE))
    card = router.store.insert_card(board.id, parsed.title, parsed.body)
    router.nav.add_card(card)


def edit_selected_card(router: Router) -> None:
    card = router.nav.selected_card()
    parsed = parse_card(router.edit(render_card(card.title, card.body)))
    card.updated_at = router.store.update_card(card.id, parsed.title, parsed.body)
    card.title = parsed.title
    card.body = parsed.body


def view_boards(router: Router) -> None:
    router.refresh_boards()
    router.nav.clear_board()
    router.set_mode(Mode.VIEWING_BOARDS)


@register_mode(Mode.VIEWING_BOARD)
def viewing_board(router: Router, msg: Message) -> bool:
    nav = router.nav
    if msg is Message.NAVIGATE_LEFT:
        nav.navigate_left()
    elif msg is Message.NAVIGATE_RIGHT:
        nav.navigate_right()
    elif msg is Message.NAVIGATE_UP:
        nav.navigate_up()
    elif msg is Message.NAVIGATE_DOWN:
        nav.navigate_down()
    elif msg is Message.NEW_CARD:
        new_card(router)
    elif msg is Message.EDIT_CARD:
        edit_selected_card(router)
    elif msg is Message.MOVE_CARD_MODE:
        nav.selected_card()
        router.set_mode(Mode.MOVING_CARD)
    elif msg is Message.VIEW_CARD_DETAIL_MODE:
        nav.selected_card()
        router.set_mode(Mode.VIEWING_CARD_DETAIL)
    elif msg is Message.DELETE_CARD:
        nav.selected_card()
        router.state.confirmation = Confirmation.NO
        router.set_mode(Mode.CONFIRM_CARD_DELETION)
    elif msg is Message.VIEW_BOARDS_MODE:
        view_boards(router)
    else:
        return False
    return True
