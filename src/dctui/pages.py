"""Pages: independently scrollable content streams.

A page owns an append-only list of entries and lays them out into a
``width`` x ``height`` viewport. Scrolling is expressed as *scrollback*,
the number of physical lines held back from the bottom of the content.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from dctui.entries import Entry, MessageRef, display_safe, entry_text
from dctui.events import event_name
from dctui.theme import ChatTheme, default_theme
from dctui.utils import wrap_text_with_ansi

if TYPE_CHECKING:
    from dctui.backend import Backend


class PageKind(enum.Enum):
    DEBUG = "debug"
    STATUS = "status"
    CHAT = "chat"


class Page:
    """Base page: entries, wrapping and scrollback."""

    kind: PageKind
    chat_id: int | None = None

    def __init__(self, name: str) -> None:
        self._name = name
        self._lines: list[Entry] = []
        self._scrollback = 0

        # Geometry of the last render, used to clamp page_up
        self._all_lines: list[str] = []
        self._last_height: int | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def lines(self) -> tuple[Entry, ...]:
        return tuple(self._lines)

    @property
    def scrollback(self) -> int:
        return self._scrollback

    def render(self, width: int, height: int) -> list[str]:
        """Return exactly *height* rows of the page at *width* columns.

        Short content is top anchored and padded with blank rows below it.
        Otherwise the window's bottom edge sits ``scrollback`` rows above
        the last physical line.
        """
        all_lines: list[str] = []
        for entry in self._lines:
            all_lines.extend(wrap_text_with_ansi(entry_text(entry), width))

        self._all_lines = all_lines
        self._last_height = height

        if height <= 0:
            return []

        total = len(all_lines)
        if total < height:
            return all_lines + [""] * (height - total)

        scrollback = min(self._scrollback, total - height)
        return all_lines[total - height - scrollback : total - scrollback]

    def page_up(self, count: int = 1) -> None:
        """Scroll toward older content, clamped against the last render.

        Before the first render, or when the content fit in the viewport,
        this does nothing. After a resize the bound stays that of the
        previous geometry until the next render.
        """
        if self._last_height is None:
            return
        rest = len(self._all_lines) - self._last_height
        if rest <= 0:
            return
        for _ in range(count):
            self._scrollback = min(self._scrollback + 1, rest)

    def page_down(self, count: int = 1) -> None:
        for _ in range(count):
            self._scrollback = max(0, self._scrollback - 1)

    def scroll_to_bottom(self) -> None:
        self._scrollback = 0

    def append(self, entry: Entry) -> None:
        """Append *entry*; strings are split into one entry per line.

        Scrollback is left alone, so a page that is scrolled up keeps
        showing the same rows.
        """
        if isinstance(entry, str):
            self._lines.extend(entry.split("\n"))
        else:
            self._lines.append(entry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, lines={len(self._lines)})"


class DebugPage(Page):
    """Raw backend event log, present only in debug mode."""

    kind = PageKind.DEBUG

    def __init__(self, theme: ChatTheme | None = None) -> None:
        super().__init__("debug")
        self._theme = theme or default_theme()

    def append_event(self, event: int, data1: object, data2: object) -> None:
        name = self._theme.event_name(event_name(event))
        code = self._theme.event_code(str(event))
        self.append(f"{name} ({code}) {data1} {data2}")


class StatusPage(Page):
    kind = PageKind.STATUS

    def __init__(self) -> None:
        super().__init__("status")


class ChatPage(Page):
    """One conversation. Its name is looked up on every access."""

    kind = PageKind.CHAT

    def __init__(self, chat_id: int, backend: Backend, theme: ChatTheme | None = None) -> None:
        super().__init__("")
        self.chat_id = chat_id
        self._backend = backend
        self._theme = theme or default_theme()

    @property
    def name(self) -> str:
        chat = self._backend.get_chat(self.chat_id)
        if chat is None:
            return f"#{self.chat_id}"
        return f"#{display_safe(chat.name)}"

    def append_message(self, msg_id: int) -> None:
        self.append(MessageRef(msg_id, self._backend, self._theme))

    def __repr__(self) -> str:
        return f"ChatPage({self.chat_id!r}, lines={len(self._lines)})"
