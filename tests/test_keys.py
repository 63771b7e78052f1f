"""Tests for dctui.keys and dctui.keybindings."""

from __future__ import annotations

from dctui.keybindings import DEFAULT_CHAT_KEYBINDINGS, ChatKeybindingsManager
from dctui.keys import is_printable, matches_key


class TestMatchesKey:
    def test_named_keys(self) -> None:
        assert matches_key("\r", "enter")
        assert matches_key("\x1b[5~", "pageUp")
        assert matches_key("\x1b[6~", "pageDown")
        assert matches_key("\x1b[Z", "shift+tab")
        assert not matches_key("\x1b[5~", "pageDown")

    def test_ctrl_letters(self) -> None:
        assert matches_key("\x0e", "ctrl+n")
        assert matches_key("\x10", "ctrl+p")
        assert matches_key("\x03", "ctrl+c")
        assert not matches_key("n", "ctrl+n")

    def test_alt_char(self) -> None:
        assert matches_key("\x1bb", "alt+b")

    def test_plain_char(self) -> None:
        assert matches_key("q", "q")
        assert not matches_key("qq", "q")


class TestIsPrintable:
    def test_text(self) -> None:
        assert is_printable("héllo")

    def test_control_and_escape(self) -> None:
        assert not is_printable("\x1b[A")
        assert not is_printable("\x03")
        assert not is_printable("")


class TestChatKeybindingsManager:
    def test_defaults(self) -> None:
        kb = ChatKeybindingsManager()
        assert kb.matches("\t", "nextPage")
        assert kb.matches("\x0e", "nextPage")
        assert kb.matches("\x1b[Z", "prevPage")
        assert kb.matches("\x1b[5~", "pageUp")
        assert kb.matches("\r", "submit")
        assert kb.get_keys("quit") == ["ctrl+c"]

    def test_user_config_replaces_action(self) -> None:
        kb = ChatKeybindingsManager({"quit": ["ctrl+q", "ctrl+c"], "nextPage": "ctrl+l"})
        assert kb.matches("\x11", "quit")
        assert kb.matches("\x0c", "nextPage")
        assert not kb.matches("\t", "nextPage")

    def test_unknown_action_matches_nothing(self) -> None:
        kb = ChatKeybindingsManager()
        assert not kb.matches("\r", "doesNotExist")  # type: ignore[arg-type]

    def test_every_default_action_has_keys(self) -> None:
        kb = ChatKeybindingsManager()
        for action in DEFAULT_CHAT_KEYBINDINGS:
            assert kb.get_keys(action)
