"""Selection cursor rules for the board list and the loaded board."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import EmptySelection

if TYPE_CHECKING:
    from ..models import Board, Card
    from ..store import Store
    from .state import UIState


class Navigator:
    """Keeps `state.selection` valid while cards and boards change.

    Rules:
    - Column moves clamp at the edges, they never wrap.
    - The card index is None exactly when the selected column is empty.
    - Card and board moves saturate at the ends of their lists.
    """

    def __init__(self, state: UIState):
        self.state = state

    # ---------------------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------------------

    def current_board(self) -> Board:
        if self.state.board is None:
            raise EmptySelection("no board loaded")
        return self.state.board

    def _column_index(self) -> int:
        board = self.current_board()
        i = self.state.selection.column_index
        if i is None or not (0 <= i < len(board.columns)):
            raise EmptySelection("no column selected")
        return i

    def selected_card(self) -> Card:
        card = self.state.selected_card()
        if card is None:
            raise EmptySelection("no card selected")
        return card

    # ---------------------------------------------------------------------
    # Board list
    # ---------------------------------------------------------------------

    def board_up(self) -> None:
        sel = self.state.selection
        if sel.board_index is None:
            return
        sel.board_index = max(sel.board_index - 1, 0)

    def board_down(self) -> None:
        sel = self.state.selection
        if sel.board_index is None:
            return
        sel.board_index = min(sel.board_index + 1, len(self.state.board_metas) - 1)

    def select_board(self, board_id: int | None = None) -> None:
        """Point the board cursor at `board_id`, or the first board."""
        metas = self.state.board_metas
        index = next((i for i, m in enumerate(metas) if m.id == board_id), 0)
        self.state.selection.board_index = index if metas else None

    def reset_for_board(self, board: Board) -> None:
        """Make `board` the loaded board with the cursor on its first column."""
        self.state.board = board
        sel = self.state.selection
        sel.column_index = 0
        sel.card_index = 0 if board.columns and board.columns[0].cards else None

    def clear_board(self) -> None:
        self.state.board = None
        self.state.selection.column_index = None
        self.state.selection.card_index = None

    # ---------------------------------------------------------------------
    # Cursor inside a board
    # ---------------------------------------------------------------------

    def _switch_column(self, source: int, target: int) -> None:
        columns = self.current_board().columns
        sel = self.state.selection
        target_cards = columns[target].cards
        if not target_cards:
            sel.card_index = None
        elif not columns[source].cards or sel.card_index is None:
            sel.card_index = 0
        else:
            sel.card_index = min(len(target_cards) - 1, sel.card_index)
        sel.column_index = target

    def navigate_left(self) -> None:
        source = self._column_index()
        self._switch_column(source, max(source - 1, 0))

    def navigate_right(self) -> None:
        source = self._column_index()
        self._switch_column(source, min(source + 1, len(self.current_board().columns) - 1))

    def navigate_up(self) -> None:
        sel = self.state.selection
        if sel.card_index is None:
            return
        sel.card_index = max(sel.card_index - 1, 0)

    def navigate_down(self) -> None:
        sel = self.state.selection
        column = self.state.selected_column()
        if sel.card_index is None or column is None:
            return
        sel.card_index = min(sel.card_index + 1, len(column.cards) - 1)

    # ---------------------------------------------------------------------
    # Card mutations
    # ---------------------------------------------------------------------

    def _move_card(self, store: Store, source: int, target: int) -> None:
        board = self.current_board()
        card = self.selected_card()
        store.set_card_status(board.id, card.id, board.columns[target].name)

        board.columns[source].cards.pop(self.state.selection.card_index)
        board.columns[target].cards.insert(0, card)
        self.state.selection.column_index = target
        self.state.selection.card_index = 0

    def move_card_left(self, store: Store) -> None:
        source = self._column_index()
        if source == 0:
            return
        self._move_card(store, source, source - 1)

    def move_card_right(self, store: Store) -> None:
        source = self._column_index()
        if source == len(self.current_board().columns) - 1:
            return
        self._move_card(store, source, source + 1)

    def delete_selected_card(self, store: Store) -> None:
        card = self.selected_card()
        store.delete_card(card.id)

        cards = self.current_board().columns[self._column_index()].cards
        index = self.state.selection.card_index
        cards.pop(index)
        if not cards:
            self.state.selection.card_index = None
        elif index >= len(cards):
            self.state.selection.card_index = len(cards) - 1

    def add_card(self, card: Card) -> None:
        """Prepend a freshly inserted card to the first column and select it."""
        board = self.current_board()
        board.columns[0].cards.insert(0, card)
        self.state.selection.column_index = 0
        self.state.selection.card_index = 0

    def resort_columns(self) -> None:
        """Order every column newest card first, keeping the selected card selected."""
        board = self.current_board()
        selected = self.state.selected_card()
        for column in board.columns:
            column.cards.sort(key=lambda c: c.id, reverse=True)
        column = self.state.selected_column()
        if selected is not None and column is not None:
            self.state.selection.card_index = next(
                i for i, c in enumerate(column.cards) if c.id == selected.id
            )
