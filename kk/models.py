"""Plain data carried between the store, the board engine and the renderer."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Card:
    id: int
    external_id: int
    title: str
    body: str
    inserted_at: str
    updated_at: str


@dataclass
class Column:
    name: str
    cards: list[Card] = field(default_factory=list)


@dataclass
class Board:
    id: int
    name: str
    columns: list[Column] = field(default_factory=list)

    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]


@dataclass
class BoardMeta:
    """Board summary shown in the board picker."""

    id: int
    name: str
    columns: list[str]
    inserted_at: str
    updated_at: str
    viewed_at: str
