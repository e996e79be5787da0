"""Board picker: list, open, create and edit boards."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import ConstraintViolation, EmptySelection, ValidationFailure
from ...markup import BOARD_TEMPLATE, parse_board, render_board
from ..messages import Message
from ..router import register_mode
from ..state import Mode

if TYPE_CHECKING:
    from ..router import Router


def open_selected_board(router: Router) -> None:
    meta = router.state.selected_board_meta()
    if meta is None:
        raise EmptySelection("no board selected")
    board = router.store.load_board(meta.id)
    router.nav.reset_for_board(board)
    router.set_mode(Mode.VIEWING_BOARD)


def new_board(router: Router) -> None:
    parsed = parse_board(router.edit(BOARD_TEMPLATE))
    board_id = router.store.create_board(parsed.name, parsed.columns)
    router.refresh_boards(select=board_id)


def edit_board(router: Router) -> None:
    """Rename the selected board and reorder or add columns.

    Existing columns can't be dropped: cards would lose their column.
    """
    meta = router.state.selected_board_meta()
    if meta is None:
        raise EmptySelection("no board selected")

    parsed = parse_board(router.edit(render_board(meta.name, meta.columns)))
    if len(set(parsed.columns)) != len(parsed.columns):
        raise ConstraintViolation("column names must be unique within a board")
    missing = [c for c in meta.columns if c not in parsed.columns]
    if missing:
        raise ValidationFailure(f"columns can't be removed: {', '.join(missing)}")

    router.store.update_board_columns_order(meta.id, parsed.name, parsed.columns)
    router.refresh_boards(select=meta.id)


@register_mode(Mode.VIEWING_BOARDS)
def viewing_boards(router: Router, msg: Message) -> bool:
    if msg is Message.NAVIGATE_UP:
        router.nav.board_up()
    elif msg is Message.NAVIGATE_DOWN:
        router.nav.board_down()
    elif msg is Message.VIEW_BOARD_MODE:
        open_selected_board(router)
    elif msg is Message.NEW_BOARD:
        new_board(router)
    elif msg is Message.EDIT_BOARD:
        edit_board(router)
    else:
        return False
    return True
