"""Session state for one run of the board UI."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..models import Board, BoardMeta, Card, Column


class Mode(Enum):
    VIEWING_BOARDS = "VIEWING BOARDS"
    VIEWING_BOARD = "VIEWING BOARD"
    VIEWING_CARD_DETAIL = "VIEWING CARD"
    MOVING_CARD = "MOVING CARD"
    CONFIRM_CARD_DELETION = "DELETING CARD"

    @property
    def title(self) -> str:
        return self.value


class RunningState(Enum):
    RUNNING = "running"
    DONE = "done"


class Confirmation(Enum):
    YES = "yes"
    NO = "no"

    def toggled(self) -> Confirmation:
        return Confirmation.NO if self is Confirmation.YES else Confirmation.YES


@dataclass
class Selection:
    """Cursor into the board list and the loaded board.

    None means there is nothing eligible to point at.
    """

    board_index: int | None = None
    column_index: int | None = None
    card_index: int | None = None


@dataclass
class UIState:
    """Everything the renderer needs and the router mutates."""

    mode: Mode = Mode.VIEWING_BOARDS
    running: RunningState = RunningState.RUNNING
    confirmation: Confirmation = Confirmation.NO
    board_metas: list[BoardMeta] = field(default_factory=list)
    board: Board | None = None
    selection: Selection = field(default_factory=Selection)
    error: str | None = None

    @property
    def is_running(self) -> bool:
        return self.running is RunningState.RUNNING

    def selected_board_meta(self) -> BoardMeta | None:
        i = self.selection.board_index
        if i is None or not (0 <= i < len(self.board_metas)):
            return None
        return self.board_metas[i]

    def selected_column(self) -> Column | None:
        i = self.selection.column_index
        if self.board is None or i is None or not (0 <= i < len(self.board.columns)):
            return None
        return self.board.columns[i]

    def selected_card(self) -> Card | None:
        column = self.selected_column()
        i = self.selection.card_index
        if column is None or i is None or not (0 <= i < len(column.cards)):
            return None
        return column.cards[i]
