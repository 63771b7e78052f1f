"""Application driver: connects a terminal, the chat view and the backend."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from dctui.backend import BackendError, EventSource
from dctui.session import SessionController
from dctui.terminal import Terminal
from dctui.view import ChatView

logger = logging.getLogger(__name__)


class ChatApp:
    """Redraws the view on input, resize and backend events.

    Rendering compares against the previous frame and only rewrites rows
    that changed; a resize forces a full redraw.
    """

    def __init__(
        self,
        terminal: Terminal,
        view: ChatView,
        events: EventSource | None = None,
    ) -> None:
        self.terminal = terminal
        self.view = view
        self._events = events
        self._previous_lines: list[str] = []
        self._previous_size: tuple[int, int] | None = None
        self._stopped = False
        self._closed = asyncio.Event()

        self.view.on_quit = self.stop

    @property
    def session(self) -> SessionController:
        return self.view.session

    @property
    def stopped(self) -> bool:
        return self._stopped

    def start(self) -> None:
        self._stopped = False
        self._closed.clear()
        self.terminal.start(self._on_input, self._on_resize)
        self.terminal.hide_cursor()
        if self._events is not None:
            self._events.subscribe(self._on_backend_event)
        self.request_render(force=True)

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        if self._events is not None:
            self._events.unsubscribe(self._on_backend_event)
        self.terminal.show_cursor()
        self.terminal.stop()
        self._closed.set()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    def request_render(self, force: bool = False) -> None:
        if self._stopped:
            return
        width, height = self.terminal.columns, self.terminal.rows
        lines = self.view.render(width, height)

        if force or self._previous_size != (width, height):
            self.terminal.clear_screen()
            self.terminal.write("\r\n".join(lines))
        else:
            for row, line in enumerate(lines):
                previous = self._previous_lines[row] if row < len(self._previous_lines) else None
                if line != previous:
                    self.terminal.move_to_row(row)
                    self.terminal.write(line)

        self._previous_lines = lines
        self._previous_size = (width, height)

    def _on_input(self, data: str) -> None:
        try:
            self.view.handle_input(data)
        except BackendError as e:
            logger.info("send failed: %s", e)
            self.session.append_status(f"send failed: {e}")
        self.request_render()

    def _on_resize(self) -> None:
        self.request_render(force=True)

    def _on_backend_event(self, event: int, data1: Any, data2: Any) -> None:
        self.session.handle_event(event, data1, data2)
        self.request_render()


async def run(app: ChatApp) -> None:
    """Start *app* and wait until the user quits."""
    app.start()
    try:
        await app.wait_closed()
    finally:
        app.stop()
