"""Page entries: plain strings and lazily rendered message references."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from dctui.theme import ChatTheme, default_theme

if TYPE_CHECKING:
    from dctui.backend import Backend

# CSI, string commands (OSC, DCS, APC, PM, SOS) and two-byte escapes
_CONTROL_SEQ_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b[\]P_^X][^\x07\x1b]*(?:\x07|\x1b\\)?"
    r"|\x1b[ -/]*[0-~]"
)
# C0 except tab, DEL and C1
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f-\x9f]")


class MessageRef:
    """A message entry that is resolved through the backend on every render.

    Nothing is cached, so edits, deletions and state changes on the backend
    show up on the next draw.
    """

    __slots__ = ("msg_id", "_backend", "_theme")

    def __init__(self, msg_id: int, backend: Backend, theme: ChatTheme | None = None) -> None:
        self.msg_id = msg_id
        self._backend = backend
        self._theme = theme or default_theme()

    def render(self) -> str:
        msg = self._backend.get_message(self.msg_id)
        if msg is None:
            return self._theme.missing(f"[message {self.msg_id} not found]")
        text = display_safe(msg.text)
        return f"{self._theme.timestamp(str(msg.timestamp))}:[{msg.from_id}] > {text}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"MessageRef({self.msg_id!r})"


Entry = Union[str, MessageRef]


def entry_text(entry: Entry) -> str:
    """Materialize *entry* to the text that gets wrapped."""
    if isinstance(entry, str):
        return entry
    return entry.render()


def display_safe(text: str) -> str:
    """Collapse *text* to one line with no terminal control sequences.

    Message text comes from remote peers; styling is added by the theme
    only after this runs.
    """
    return _CONTROL_CHAR_RE.sub("", _CONTROL_SEQ_RE.sub("", text))
