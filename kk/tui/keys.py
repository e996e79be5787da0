"""Keyboard input with a timeout, on top of prompt_toolkit's raw input."""
from __future__ import annotations

import select
from contextlib import contextmanager
from typing import Iterator

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.keys import Keys


def key_name(key: Keys | str) -> str:
    """Normalize a prompt_toolkit key to the names used by the keymap.

    Special keys become their `Keys` value ("left", "escape", "c-m"),
    printable keys stay as the character.
    """
    if isinstance(key, Keys):
        return key.value
    return key


class KeyReader:
    def __init__(self, inp: Input | None = None):
        self.input = inp or create_input()

    @contextmanager
    def raw(self) -> Iterator[None]:
        with self.input.raw_mode():
            yield

    @contextmanager
    def cooked(self) -> Iterator[None]:
        with self.input.cooked_mode():
            yield

    def read(self, timeout: float) -> list[str]:
        """Wait up to `timeout` seconds and return the keys pressed, if any."""
        ready, _, _ = select.select([self.input.fileno()], [], [], max(0.0, timeout))
        if not ready:
            return []
        presses = self.input.read_keys() + self.input.flush_keys()
        return [key_name(p.key) for p in presses]
