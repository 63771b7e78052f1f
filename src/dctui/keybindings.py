"""Chat client keybindings manager."""

from __future__ import annotations

from typing import Literal

from dctui.keys import KeyId, matches_key

ChatAction = Literal[
    # Pages
    "nextPage",
    "prevPage",
    "pageUp",
    "pageDown",
    "scrollToBottom",
    # Prompt
    "submit",
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    "deleteCharBackward",
    "deleteCharForward",
    "deleteToLineStart",
    # Application
    "quit",
]

ChatKeybindingsConfig = dict[ChatAction, KeyId | list[KeyId]]

DEFAULT_CHAT_KEYBINDINGS: dict[ChatAction, KeyId | list[KeyId]] = {
    "nextPage": ["tab", "ctrl+n"],
    "prevPage": ["shift+tab", "ctrl+p"],
    "pageUp": ["pageUp", "up"],
    "pageDown": ["pageDown", "down"],
    "scrollToBottom": "escape",
    "submit": "enter",
    "cursorLeft": ["left", "ctrl+b"],
    "cursorRight": ["right", "ctrl+f"],
    "cursorLineStart": ["home", "ctrl+a"],
    "cursorLineEnd": ["end", "ctrl+e"],
    "deleteCharBackward": "backspace",
    "deleteCharForward": ["delete", "ctrl+d"],
    "deleteToLineStart": "ctrl+u",
    "quit": "ctrl+c",
}


class ChatKeybindingsManager:
    """Maps actions to the keys that trigger them."""

    def __init__(self, config: ChatKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[ChatAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: ChatKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_CHAT_KEYBINDINGS.items():
            self._action_to_keys[action] = list(keys) if isinstance(keys, list) else [keys]

        # User config replaces the defaults action by action
        for action, keys in config.items():
            self._action_to_keys[action] = list(keys) if isinstance(keys, list) else [keys]

    def matches(self, data: str, action: ChatAction) -> bool:
        return any(matches_key(data, key) for key in self._action_to_keys.get(action, []))

    def get_keys(self, action: ChatAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])
