"""Main loop and mode registry for the board UI."""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager, contextmanager, nullcontext
from typing import TYPE_CHECKING, Callable, Iterator

from rich.live import Live

from ..editor import run_editor
from ..errors import EmptySelection, KanbanError
from .components import render_screen
from .keymap import message_for_key
from .keys import KeyReader
from .messages import Message, Msg, SetError
from .state import Mode, RunningState
from .timers import DeferredMessages

if TYPE_CHECKING:
    from rich.console import Console
    from rich.layout import Layout

    from ..settings import Settings
    from ..store import Store
    from .navigator import Navigator
    from .state import UIState

log = logging.getLogger(__name__)


class Router:
    """Message loop with per-mode dispatch.

    Each message is handled by the function registered for the current
    mode. `Quit` and `SetError` are handled here for every mode. Errors
    raised by a handler become a modeline banner that clears itself after
    `KK_ERROR_DISPLAY_SEC`.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        state: UIState,
        nav: Navigator,
        store: Store,
        *,
        editor: Callable[[str], str] | None = None,
        timers: DeferredMessages | None = None,
        keys: KeyReader | None = None,
    ):
        """Initialize router with dependencies.

        Args:
            console: Rich Console for output
            settings: Application settings
            state: UI session state
            nav: Navigator over `state`
            store: Board storage
            editor: Text-in, text-out editor; defaults to $EDITOR
            timers: Delayed message queue
            keys: Keyboard reader; created on `run()` when omitted
        """
        self.console = console
        self.settings = settings
        self.state = state
        self.nav = nav
        self.store = store
        self.editor = editor if editor is not None else (lambda text: run_editor(settings.EDITOR, text))
        self.timers = timers if timers is not None else DeferredMessages()
        self.keys = keys
        self._suspend: Callable[[], AbstractContextManager] = nullcontext

    @property
    def highlight(self) -> str:
        return self.settings.KK_HIGHLIGHT_COLOR

    # ---------------------------------------------------------------------
    # Helpers used by mode handlers
    # ---------------------------------------------------------------------

    def start(self) -> None:
        """Open the most recently viewed board, or the board list if there is none."""
        board = self.store.load_most_recently_viewed_board()
        if board is not None:
            self.nav.reset_for_board(board)
            self.set_mode(Mode.VIEWING_BOARD)
        else:
            self.refresh_boards()
            self.set_mode(Mode.VIEWING_BOARDS)

    def set_mode(self, mode: Mode) -> None:
        log.debug("mode %s -> %s", self.state.mode.name, mode.name)
        self.state.mode = mode

    def refresh_boards(self, select: int | None = None) -> None:
        self.state.board_metas = self.store.get_board_metas()
        self.nav.select_board(select)

    def edit(self, text: str) -> str:
        """Hand `text` to the editor with the screen released."""
        with self._suspend():
            return self.editor(text)

    # ---------------------------------------------------------------------
    # Update
    # ---------------------------------------------------------------------

    def update(self, msg: Msg) -> None:
        if msg is Message.QUIT:
            self.state.running = RunningState.DONE
            return
        if isinstance(msg, SetError):
            self._set_error(msg.text)
            return
        if msg is Message.CLEAR_ERROR:
            self.state.error = None
            return

        handler = MODES.get(self.state.mode)
        try:
            handled = handler(self, msg) if handler is not None else False
        except EmptySelection as e:
            log.debug("nothing selected for %s: %s", msg, e)
            return
        except KanbanError as e:
            log.warning("%s failed in %s: %s", msg, self.state.mode.name, e)
            self.update(SetError(str(e)))
            return

        if not handled:
            log.warning("ignoring %s in mode %s", msg, self.state.mode.name)

    def _set_error(self, text: str | None) -> None:
        self.state.error = text
        if text:
            self.timers.schedule(self.settings.KK_ERROR_DISPLAY_SEC, Message.CLEAR_ERROR)

    # ---------------------------------------------------------------------
    # Loop
    # ---------------------------------------------------------------------

    def render(self) -> Layout:
        return render_screen(self.state, self.highlight)

    def _poll_timeout(self) -> float:
        timeout = self.settings.KK_INPUT_POLL_SEC
        pending = self.timers.seconds_until_next()
        if pending is not None:
            timeout = min(timeout, pending)
        return timeout

    @contextmanager
    def _released(self, live: Live, reader: KeyReader) -> Iterator[None]:
        live.stop()
        try:
            with reader.cooked():
                yield
        finally:
            live.start(refresh=True)

    def run(self) -> None:
        """Draw, wait for keys, dispatch, repeat until Quit."""
        reader = self.keys if self.keys is not None else KeyReader()
        with reader.raw(), Live(
            self.render(), console=self.console, screen=True, auto_refresh=False
        ) as live:
            self._suspend = lambda: self._released(live, reader)
            try:
                while self.state.is_running:
                    live.update(self.render(), refresh=True)
                    for key in reader.read(self._poll_timeout()):
                        msg = message_for_key(self.state.mode, key)
                        if msg is not None:
                            self.update(msg)
                        if not self.state.is_running:
                            break
                    for msg in self.timers.pop_due():
                        self.update(msg)
            finally:
                self._suspend = nullcontext


# Mode registry - maps modes to handler functions.
# Handlers return True when they handled the message.
MODES: dict[Mode, Callable[[Router, Message], bool]] = {}


def register_mode(mode: Mode):
    """Decorator to register a mode handler.

    Usage:
        @register_mode(Mode.VIEWING_BOARD)
        def viewing_board(router: Router, msg: Message) -> bool:
            ...
    """
    def decorator(fn: Callable[[Router, Message], bool]):
        MODES[mode] = fn
        return fn
    return decorator
