from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


# Millisecond resolution so recency ordering survives quick successive views.
NOW_SQL = "strftime('%Y-%m-%d %H:%M:%f', 'now')"

SCHEMA_SQL = f"""
PRAGMA foreign_keys=ON;
PRAGMA synchronous=EXTRA;

CREATE TABLE IF NOT EXISTS boards (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    card_id INTEGER NOT NULL DEFAULT 1,
    inserted_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
    updated_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
    viewed_at TEXT NOT NULL DEFAULT ({NOW_SQL})
);

-- Columns. Order values may collide while a reorder is in flight.
CREATE TABLE IF NOT EXISTS statuses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    column_order INTEGER NOT NULL,
    board_id INTEGER NOT NULL,
    inserted_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
    updated_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
    UNIQUE(name, board_id),
    FOREIGN KEY(board_id) REFERENCES boards(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS cards (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    external_id INTEGER NOT NULL,
    board_id INTEGER NOT NULL,
    status_id INTEGER NOT NULL,
    title TEXT NOT NULL,
    body TEXT NOT NULL DEFAULT '',
    inserted_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
    updated_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
    UNIQUE(external_id, board_id),
    FOREIGN KEY(board_id) REFERENCES boards(id) ON DELETE CASCADE,
    FOREIGN KEY(status_id) REFERENCES statuses(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_statuses_board ON statuses(board_id, column_order);
CREATE INDEX IF NOT EXISTS idx_cards_status ON cards(status_id, id);

CREATE TRIGGER IF NOT EXISTS cards_updated AFTER UPDATE OF title, body, status_id ON cards
BEGIN
    UPDATE cards SET updated_at = ({NOW_SQL}) WHERE id = NEW.id;
    UPDATE boards SET updated_at = ({NOW_SQL}) WHERE id = NEW.board_id;
END;

CREATE TRIGGER IF NOT EXISTS cards_inserted AFTER INSERT ON cards
BEGIN
    UPDATE boards SET updated_at = ({NOW_SQL}) WHERE id = NEW.board_id;
END;

CREATE TRIGGER IF NOT EXISTS cards_deleted AFTER DELETE ON cards
BEGIN
    UPDATE boards SET updated_at = ({NOW_SQL}) WHERE id = OLD.board_id;
END;

CREATE TRIGGER IF NOT EXISTS statuses_updated AFTER UPDATE OF name, column_order ON statuses
BEGIN
    UPDATE statuses SET updated_at = ({NOW_SQL}) WHERE id = NEW.id;
    UPDATE boards SET updated_at = ({NOW_SQL}) WHERE id = NEW.board_id;
END;
"""


def connect(db_path: Path | str, *, timeout: float = 5.0) -> sqlite3.Connection:
    """Open the board database.

    The connection runs in autocommit mode; multi-statement writes go
    through `transaction()` which issues BEGIN IMMEDIATE itself.
    """
    conn = sqlite3.connect(str(db_path), timeout=timeout, isolation_level=None)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    conn.executescript(SCHEMA_SQL)


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run a block inside BEGIN IMMEDIATE; commit on success, roll back on error."""
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        # sqlite may already have rolled back on its own (SQLITE_FULL, interrupt).
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        raise
    else:
        conn.execute("COMMIT")
