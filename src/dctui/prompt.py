"""Prompt component - single-line text input with horizontal scrolling."""

from __future__ import annotations

from typing import Callable

import grapheme

from dctui.keybindings import ChatKeybindingsManager
from dctui.keys import is_printable
from dctui.utils import truncate_to_width, visible_width

_PASTE_START = "\x1b[200~"
_PASTE_END = "\x1b[201~"


class Prompt:
    """Single-line input shown at the bottom of the chat view."""

    def __init__(
        self,
        keybindings: ChatKeybindingsManager | None = None,
        prefix: str = "> ",
    ) -> None:
        self._kb = keybindings or ChatKeybindingsManager()
        self._prefix = prefix
        self._value = ""
        self._cursor = 0

        self.on_submit: Callable[[str], None] | None = None

        self._paste_buffer = ""
        self._is_in_paste = False

    @property
    def value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_value(self, value: str) -> None:
        self._value = value
        self._cursor = len(value)

    def clear(self) -> None:
        self.set_value("")

    def handle_input(self, data: str) -> None:
        if _PASTE_START in data:
            self._is_in_paste = True
            self._paste_buffer = ""
            data = data.replace(_PASTE_START, "")

        if self._is_in_paste:
            self._paste_buffer += data
            end = self._paste_buffer.find(_PASTE_END)
            if end != -1:
                pasted = self._paste_buffer[:end]
                remaining = self._paste_buffer[end + len(_PASTE_END) :]
                self._is_in_paste = False
                self._paste_buffer = ""
                self._insert(" ".join(pasted.replace("\r", "").split("\n")))
                if remaining:
                    self.handle_input(remaining)
            return

        kb = self._kb
        if kb.matches(data, "submit"):
            if self.on_submit:
                self.on_submit(self._value)
            return

        if kb.matches(data, "deleteCharBackward"):
            if self._cursor > 0:
                last = _last_grapheme(self._value[: self._cursor])
                self._value = self._value[: self._cursor - len(last)] + self._value[self._cursor :]
                self._cursor -= len(last)
            return

        if kb.matches(data, "deleteCharForward"):
            if self._cursor < len(self._value):
                first = _first_grapheme(self._value[self._cursor :])
                self._value = self._value[: self._cursor] + self._value[self._cursor + len(first) :]
            return

        if kb.matches(data, "deleteToLineStart"):
            self._value = self._value[self._cursor :]
            self._cursor = 0
            return

        if kb.matches(data, "cursorLeft"):
            if self._cursor > 0:
                self._cursor -= len(_last_grapheme(self._value[: self._cursor]))
            return

        if kb.matches(data, "cursorRight"):
            if self._cursor < len(self._value):
                self._cursor += len(_first_grapheme(self._value[self._cursor :]))
            return

        if kb.matches(data, "cursorLineStart"):
            self._cursor = 0
            return

        if kb.matches(data, "cursorLineEnd"):
            self._cursor = len(self._value)
            return

        if is_printable(data):
            self._insert(data)

    def _insert(self, text: str) -> None:
        self._value = self._value[: self._cursor] + text + self._value[self._cursor :]
        self._cursor += len(text)

    def render(self, width: int) -> list[str]:
        """Render the prompt row, scrolled so the cursor stays visible."""
        available = max(1, width - visible_width(self._prefix))

        start = 0
        before = self._value[: self._cursor]
        # Keep one column free for the cursor at the end of the text
        while visible_width(before[start:]) > available - 1 and start < len(before):
            start += len(_first_grapheme(before[start:]))

        shown = truncate_to_width(self._value[start:], available, ellipsis="")
        return [truncate_to_width(self._prefix + shown, width, ellipsis="")]


def _first_grapheme(text: str) -> str:
    return next(iter(grapheme.graphemes(text)), "")


def _last_grapheme(text: str) -> str:
    graphemes = list(grapheme.graphemes(text))
    return graphemes[-1] if graphemes else ""
