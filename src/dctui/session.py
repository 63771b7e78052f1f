"""Session controller: owns the pages and routes content and input to them."""

from __future__ import annotations

import logging
from typing import Any

from dctui.backend import Backend
from dctui.events import MESSAGE_EVENTS, STATUS_EVENTS, event_name
from dctui.pages import ChatPage, DebugPage, Page, PageKind, StatusPage
from dctui.theme import ChatTheme, default_theme

logger = logging.getLogger(__name__)


class SessionController:
    """Ordered pages plus the index of the one on screen.

    Page order is: debug (when enabled), status, then one chat page per
    conversation in order of first reference. Pages are never removed, so
    the list is never empty and ``active_index`` always points into it.
    """

    def __init__(
        self,
        backend: Backend,
        debug: bool = False,
        theme: ChatTheme | None = None,
    ) -> None:
        self._backend = backend
        self._theme = theme or default_theme()
        self._pages: list[Page] = []
        self._chat_pages: dict[int, ChatPage] = {}
        self._active = 0

        self.debug: DebugPage | None = None
        if debug:
            self.debug = DebugPage(self._theme)
            self._pages.append(self.debug)

        self.status = StatusPage()
        self._pages.append(self.status)

    # -- pages --------------------------------------------------------------

    @property
    def debug_enabled(self) -> bool:
        return self.debug is not None

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(self._pages)

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def current_page(self) -> Page:
        return self._pages[self._active]

    def get_or_create_chat_page(self, chat_id: int) -> ChatPage:
        page = self._chat_pages.get(chat_id)
        if page is None:
            page = ChatPage(chat_id, self._backend, self._theme)
            self._chat_pages[chat_id] = page
            self._pages.append(page)
            logger.debug("created page for chat %s", chat_id)
        return page

    def chat_page(self, chat_id: int) -> ChatPage | None:
        return self._chat_pages.get(chat_id)

    # -- navigation ---------------------------------------------------------

    def next_page(self) -> None:
        self._active = (self._active + 1) % len(self._pages)

    def prev_page(self) -> None:
        self._active = len(self._pages) - 1 if self._active == 0 else self._active - 1

    def select_page(self, index: int) -> None:
        self._active = max(0, min(index, len(self._pages) - 1))

    def page_up(self) -> None:
        self.current_page.page_up()

    def page_down(self) -> None:
        self.current_page.page_down()

    # -- content ------------------------------------------------------------

    def load_chats(self) -> None:
        """Append the full history of every chat.

        Always appends, so a second call duplicates everything.
        """
        for chat_id in self._backend.get_chat_list():
            msg_ids = self._backend.get_chat_messages(chat_id, 0, 0)
            for msg_id in msg_ids:
                self.route_append(chat_id, msg_id)
            logger.debug("loaded %d messages for chat %s", len(msg_ids), chat_id)

    def route_append(self, chat_id: int, msg_id: int) -> None:
        self.get_or_create_chat_page(chat_id).append_message(msg_id)

    def append_status(self, line: str) -> None:
        self.status.append(line)

    def log_event(self, event: int, data1: Any, data2: Any) -> None:
        if self.debug is not None:
            self.debug.append_event(event, data1, data2)

    def handle_event(self, event: int, data1: Any, data2: Any) -> None:
        """Route a backend event: log it, then file messages and notices."""
        self.log_event(event, data1, data2)
        if event in MESSAGE_EVENTS:
            if isinstance(data2, int) and data2 > 0:
                self.route_append(data1, data2)
        elif event in STATUS_EVENTS:
            self.append_status(f"{event_name(event)}: {data2}")

    # -- input --------------------------------------------------------------

    def on_enter(self, line: str) -> None:
        """Send *line* to the active conversation.

        On the debug and status pages the input is dropped. Backend errors
        propagate to the caller.
        """
        page = self.current_page
        if page.kind is not PageKind.CHAT:
            logger.debug("dropped input on %s page", page.kind.value)
            return
        self._backend.send_text_message(page.chat_id, line)
