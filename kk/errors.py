"""Error types raised by the store, the markup parsers and the board engine.

Everything derives from `KanbanError` so the UI loop can turn any of them
into a modeline banner. `EmptySelection` is the one kind the loop drops
silently: it only means a key was pressed with nothing to act on.
"""
from __future__ import annotations


class KanbanError(Exception):
    """Base class for kk errors."""


class ParseFailure(KanbanError):
    """Editor output did not follow the card or board text format."""


class ConstraintViolation(KanbanError):
    """A uniqueness rule was broken (board name, column name within a board)."""


class ValidationFailure(KanbanError):
    """Input was well formed but not acceptable (no columns, dropped columns)."""


class EmptySelection(KanbanError):
    """The action needs a selected card or board and there is none."""


class NotFound(KanbanError):
    """A board or card id no longer exists."""


class StoreBusy(KanbanError):
    """Another writer held the database lock past the busy timeout."""


class EditorFailure(KanbanError):
    """The external editor is missing, failed to start or exited non-zero."""
