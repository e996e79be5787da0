"""kk: a personal kanban board for the terminal."""

__version__ = "0.1.0"
