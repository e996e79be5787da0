"""Persistent board storage on top of a single SQLite file.

Every multi-step write runs in its own BEGIN IMMEDIATE transaction so the
per-board card counter, the column rows and the cards stay consistent even
if the process dies half way. SQLite errors are translated into the
`kk.errors` hierarchy at this boundary.
"""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .db import NOW_SQL, connect, init_db, transaction
from .errors import ConstraintViolation, NotFound, StoreBusy, ValidationFailure
from .models import Board, BoardMeta, Card, Column
from .settings import Settings

log = logging.getLogger(__name__)

_CARD_COLUMNS = "id, external_id, title, body, inserted_at, updated_at"

# sqlite reports the offending columns; map them to something readable.
_CONSTRAINT_MESSAGES = {
    "boards.name": "a board with that name already exists",
    "statuses.name, statuses.board_id": "column names must be unique within a board",
}


def _constraint_message(exc: sqlite3.IntegrityError) -> str:
    text = str(exc)
    for needle, message in _CONSTRAINT_MESSAGES.items():
        if needle in text:
            return message
    return text


def _is_busy(exc: sqlite3.OperationalError) -> bool:
    text = str(exc).lower()
    return "locked" in text or "busy" in text


def _card(row: sqlite3.Row) -> Card:
    return Card(
        id=row["id"],
        external_id=row["external_id"],
        title=row["title"],
        body=row["body"],
        inserted_at=row["inserted_at"],
        updated_at=row["updated_at"],
    )


class Store:
    """Boards, columns and cards persisted in SQLite."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        init_db(conn)

    @classmethod
    def open(cls, db_path: Path | str, *, busy_timeout: float = 5.0) -> Store:
        log.info("opening board database %s", db_path)
        return cls(connect(db_path, timeout=busy_timeout))

    @classmethod
    def from_settings(cls, settings: Settings) -> Store:
        return cls.open(settings.KK_DB_PATH, busy_timeout=settings.KK_BUSY_TIMEOUT_SEC)

    def close(self) -> None:
        self.conn.close()

    # ---------------------------------------------------------------------
    # Plumbing
    # ---------------------------------------------------------------------

    @contextmanager
    def _errors(self) -> Iterator[None]:
        try:
            yield
        except sqlite3.IntegrityError as e:
            log.warning("constraint failed: %s", e)
            raise ConstraintViolation(_constraint_message(e)) from e
        except sqlite3.OperationalError as e:
            if _is_busy(e):
                log.warning("database busy: %s", e)
                raise StoreBusy("the board database is busy, try again") from e
            raise

    @contextmanager
    def _write(self) -> Iterator[sqlite3.Connection]:
        with self._errors():
            with transaction(self.conn) as conn:
                yield conn

    def _read_board(self, board_id: int, name: str) -> Board:
        columns: dict[int, Column] = {}
        for row in self.conn.execute(
            "SELECT id, name FROM statuses WHERE board_id = ? ORDER BY column_order, id",
            (board_id,),
        ):
            columns[row["id"]] = Column(name=row["name"])

        for row in self.conn.execute(
            f"SELECT {_CARD_COLUMNS}, status_id FROM cards WHERE board_id = ? ORDER BY id DESC",
            (board_id,),
        ):
            columns[row["status_id"]].cards.append(_card(row))

        return Board(id=board_id, name=name, columns=list(columns.values()))

    # ---------------------------------------------------------------------
    # Boards
    # ---------------------------------------------------------------------

    def create_board(self, name: str, column_names: list[str]) -> int:
        """Create a board and its columns in one transaction.

        Args:
            name: Board name, unique across all boards
            column_names: Column names in display order (at least one)

        Returns:
            The new board id
        """
        if not column_names:
            raise ValidationFailure("a board needs at least one column")

        with self._write() as conn:
            cur = conn.execute("INSERT INTO boards(name) VALUES (?)", (name,))
            board_id = int(cur.lastrowid)
            conn.executemany(
                "INSERT INTO statuses(name, column_order, board_id) VALUES (?, ?, ?)",
                [(col, order, board_id) for order, col in enumerate(column_names)],
            )
        log.info("created board id=%s name=%r columns=%s", board_id, name, column_names)
        return board_id

    def get_board_metas(self) -> list[BoardMeta]:
        """Summaries of every board, most recently viewed first."""
        with self._errors():
            boards = self.conn.execute(
                "SELECT id, name, inserted_at, updated_at, viewed_at FROM boards "
                "ORDER BY viewed_at DESC, id DESC"
            ).fetchall()
            columns: dict[int, list[str]] = {}
            for row in self.conn.execute(
                "SELECT board_id, name FROM statuses ORDER BY board_id, column_order, id"
            ):
                columns.setdefault(row["board_id"], []).append(row["name"])

        return [
            BoardMeta(
                id=b["id"],
                name=b["name"],
                columns=columns.get(b["id"], []),
                inserted_at=b["inserted_at"],
                updated_at=b["updated_at"],
                viewed_at=b["viewed_at"],
            )
            for b in boards
        ]

    def load_board(self, board_id: int) -> Board:
        """Load a board with its columns and cards, and mark it as viewed now."""
        with self._write() as conn:
            row = conn.execute("SELECT id, name FROM boards WHERE id = ?", (board_id,)).fetchone()
            if row is None:
                raise NotFound(f"board {board_id} no longer exists")
            conn.execute(f"UPDATE boards SET viewed_at = ({NOW_SQL}) WHERE id = ?", (board_id,))
            board = self._read_board(row["id"], row["name"])
        log.debug("loaded board id=%s", board_id)
        return board

    def load_most_recently_viewed_board(self) -> Board | None:
        """The board viewed last, or None when there are no boards.

        Does not touch the viewed timestamp.
        """
        with self._errors():
            row = self.conn.execute(
                "SELECT id, name FROM boards ORDER BY viewed_at DESC, id DESC LIMIT 1"
            ).fetchone()
            if row is None:
                return None
            return self._read_board(row["id"], row["name"])

    def update_board_columns_order(self, board_id: int, name: str, column_names: list[str]) -> Board:
        """Rename a board and set its column order, adding new columns.

        Columns not listed keep their old order value. Callers are expected
        to pass a superset of the existing column names.
        """
        with self._write() as conn:
            cur = conn.execute("UPDATE boards SET name = ? WHERE id = ?", (name, board_id))
            if cur.rowcount == 0:
                raise NotFound(f"board {board_id} no longer exists")
            for order, col in enumerate(column_names):
                conn.execute(
                    "INSERT INTO statuses(name, column_order, board_id) VALUES (?, ?, ?) "
                    "ON CONFLICT(name, board_id) DO UPDATE SET column_order = excluded.column_order",
                    (col, order, board_id),
                )
        log.info("updated board id=%s name=%r columns=%s", board_id, name, column_names)
        return self.load_board(board_id)

    # ---------------------------------------------------------------------
    # Cards
    # ---------------------------------------------------------------------

    def cards_for_column(self, board_id: int, column_name: str) -> list[Card]:
        """Cards of one column, newest first."""
        with self._errors():
            rows = self.conn.execute(
                "SELECT c.id, c.external_id, c.title, c.body, c.inserted_at, c.updated_at FROM cards c "
                "JOIN statuses s ON s.id = c.status_id "
                "WHERE s.board_id = ? AND s.name = ? ORDER BY c.id DESC",
                (board_id, column_name),
            ).fetchall()
        return [_card(r) for r in rows]

    def insert_card(self, board_id: int, title: str, body: str) -> Card:
        """Insert a card into the board's first column.

        The card's external id is taken from the board counter, which is
        bumped in the same transaction.
        """
        with self._write() as conn:
            status = conn.execute(
                "SELECT id FROM statuses WHERE board_id = ? ORDER BY column_order, id LIMIT 1",
                (board_id,),
            ).fetchone()
            counter = conn.execute("SELECT card_id FROM boards WHERE id = ?", (board_id,)).fetchone()
            if status is None or counter is None:
                raise NotFound(f"board {board_id} no longer exists")
            cur = conn.execute(
                "INSERT INTO cards(external_id, board_id, status_id, title, body) VALUES (?, ?, ?, ?, ?)",
                (counter["card_id"], board_id, status["id"], title, body),
            )
            conn.execute("UPDATE boards SET card_id = card_id + 1 WHERE id = ?", (board_id,))
            row = conn.execute(f"SELECT {_CARD_COLUMNS} FROM cards WHERE id = ?", (cur.lastrowid,)).fetchone()
        card = _card(row)
        log.info("inserted card id=%s external_id=%s board=%s", card.id, card.external_id, board_id)
        return card

    def update_card(self, card_id: int, title: str, body: str) -> str:
        """Update a card's text; returns the new updated_at timestamp."""
        with self._write() as conn:
            cur = conn.execute("UPDATE cards SET title = ?, body = ? WHERE id = ?", (title, body, card_id))
            if cur.rowcount == 0:
                raise NotFound(f"card {card_id} no longer exists")
            row = conn.execute("SELECT updated_at FROM cards WHERE id = ?", (card_id,)).fetchone()
        log.debug("updated card id=%s", card_id)
        return row["updated_at"]

    def set_card_status(self, board_id: int, card_id: int, column_name: str) -> None:
        """Point a card at the named column of its board.

        An unknown column name leaves the card untouched.
        """
        params = {"board_id": board_id, "card_id": card_id, "name": column_name}
        with self._write() as conn:
            cur = conn.execute(
                "UPDATE cards SET status_id = "
                "(SELECT id FROM statuses WHERE board_id = :board_id AND name = :name) "
                "WHERE id = :card_id AND EXISTS "
                "(SELECT 1 FROM statuses WHERE board_id = :board_id AND name = :name)",
                params,
            )
        if cur.rowcount == 0:
            log.debug("set_card_status matched nothing: %s", params)

    def delete_card(self, card_id: int) -> None:
        with self._write() as conn:
            conn.execute("DELETE FROM cards WHERE id = ?", (card_id,))
        log.info("deleted card id=%s", card_id)
