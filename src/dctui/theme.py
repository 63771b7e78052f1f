"""Styling callables for page content and chrome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

_RESET = "\x1b[0m"


def _sgr(code: str) -> Callable[[str], str]:
    def style(text: str) -> str:
        return f"\x1b[{code}m{text}{_RESET}"

    return style


def _identity(text: str) -> str:
    return text


yellow = _sgr("33")
green = _sgr("32")
dim = _sgr("2")
bold = _sgr("1")
inverse = _sgr("7")


@dataclass
class ChatTheme:
    """How each styled fragment of the UI is rendered.

    Every field maps raw text to the text as written to the terminal.
    """

    timestamp: Callable[[str], str] = yellow
    event_name: Callable[[str], str] = yellow
    event_code: Callable[[str], str] = green
    missing: Callable[[str], str] = dim
    tab: Callable[[str], str] = _identity
    active_tab: Callable[[str], str] = inverse
    scroll_info: Callable[[str], str] = dim
    prompt: Callable[[str], str] = bold


def default_theme() -> ChatTheme:
    return ChatTheme()


def plain_theme() -> ChatTheme:
    """A theme that applies no ANSI formatting at all."""
    return ChatTheme(
        timestamp=_identity,
        event_name=_identity,
        event_code=_identity,
        missing=_identity,
        tab=_identity,
        active_tab=_identity,
        scroll_info=_identity,
        prompt=_identity,
    )
