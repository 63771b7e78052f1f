"""Full-screen chat view: tab bar, active page viewport and prompt."""

from __future__ import annotations

from typing import Callable

from dctui.keybindings import ChatAction, ChatKeybindingsManager
from dctui.prompt import Prompt
from dctui.session import SessionController
from dctui.theme import ChatTheme, default_theme
from dctui.utils import truncate_to_width


class ChatView:
    """Lays out the session into terminal rows and dispatches key input."""

    def __init__(
        self,
        session: SessionController,
        keybindings: ChatKeybindingsManager | None = None,
        theme: ChatTheme | None = None,
    ) -> None:
        self.session = session
        self._kb = keybindings or ChatKeybindingsManager()
        self._theme = theme or default_theme()
        self.prompt = Prompt(self._kb, prefix=self._theme.prompt("> "))
        self.prompt.on_submit = self._submit

        self.on_quit: Callable[[], None] | None = None

    def render(self, width: int, height: int) -> list[str]:
        """Return exactly *height* rows."""
        if height <= 0:
            return []

        rows = [self._render_tab_bar(width)]
        viewport_height = height - 2
        if viewport_height > 0:
            rows.extend(self.session.current_page.render(width, viewport_height))
        rows.extend(self.prompt.render(width))
        return rows[-height:]

    def _render_tab_bar(self, width: int) -> str:
        theme = self._theme
        tabs: list[str] = []
        for index, page in enumerate(self.session.pages):
            label = f" {page.name} "
            if index == self.session.active_index:
                tabs.append(theme.active_tab(label))
            else:
                tabs.append(theme.tab(label))

        bar = "".join(tabs)
        scrollback = self.session.current_page.scrollback
        if scrollback > 0:
            bar += theme.scroll_info(f" [+{scrollback}]")
        return truncate_to_width(bar, width)

    def handle_input(self, data: str) -> None:
        kb = self._kb
        session = self.session

        if kb.matches(data, "quit"):
            if self.on_quit:
                self.on_quit()
        elif kb.matches(data, "nextPage"):
            session.next_page()
        elif kb.matches(data, "prevPage"):
            session.prev_page()
        elif kb.matches(data, "pageUp"):
            session.page_up()
        elif kb.matches(data, "pageDown"):
            session.page_down()
        elif kb.matches(data, "scrollToBottom"):
            session.current_page.scroll_to_bottom()
        else:
            self.prompt.handle_input(data)

    def _submit(self, value: str) -> None:
        if not value.strip():
            return
        # Cleared only once the backend accepted the line
        self.session.on_enter(value)
        self.prompt.clear()


def help_line(keybindings: ChatKeybindingsManager) -> str:
    """One-line key summary for the status page, built from the active bindings."""

    def key(action: ChatAction) -> str:
        keys = keybindings.get_keys(action)
        return keys[0] if keys else "(unbound)"

    return (
        f"{key('nextPage')}/{key('prevPage')} switch pages, "
        f"{key('pageUp')}/{key('pageDown')} scroll, "
        f"{key('quit')} quits."
    )
