"""Tests for the Prompt component."""

from __future__ import annotations

from dctui.prompt import Prompt
from dctui.utils import visible_width


def _type(prompt: Prompt, text: str) -> None:
    for ch in text:
        prompt.handle_input(ch)


class TestEditing:
    def test_typing_inserts(self) -> None:
        prompt = Prompt()
        _type(prompt, "hey")
        assert prompt.value == "hey"
        assert prompt.cursor == 3

    def test_backspace(self) -> None:
        prompt = Prompt()
        _type(prompt, "hey")
        prompt.handle_input("\x7f")
        assert prompt.value == "he"

    def test_backspace_at_start_is_noop(self) -> None:
        prompt = Prompt()
        prompt.handle_input("\x7f")
        assert prompt.value == ""

    def test_cursor_movement_and_insert(self) -> None:
        prompt = Prompt()
        _type(prompt, "hllo")
        prompt.handle_input("\x01")  # ctrl+a
        prompt.handle_input("\x1b[C")  # right
        prompt.handle_input("e")
        assert prompt.value == "hello"

    def test_forward_delete(self) -> None:
        prompt = Prompt()
        _type(prompt, "abc")
        prompt.handle_input("\x1b[D")
        prompt.handle_input("\x1b[3~")
        assert prompt.value == "ab"

    def test_delete_to_line_start(self) -> None:
        prompt = Prompt()
        _type(prompt, "abc def")
        for _ in range(3):
            prompt.handle_input("\x1b[D")
        prompt.handle_input("\x15")
        assert prompt.value == "def"
        assert prompt.cursor == 0

    def test_control_characters_ignored(self) -> None:
        prompt = Prompt()
        prompt.handle_input("\x07")
        assert prompt.value == ""

    def test_bracketed_paste_flattens_newlines(self) -> None:
        prompt = Prompt()
        prompt.handle_input("\x1b[200~one\ntwo\x1b[201~")
        assert prompt.value == "one two"

    def test_split_paste(self) -> None:
        prompt = Prompt()
        prompt.handle_input("\x1b[200~par")
        prompt.handle_input("tial\x1b[201~!")
        assert prompt.value == "partial!"


class TestSubmit:
    def test_enter_calls_on_submit(self) -> None:
        submitted: list[str] = []
        prompt = Prompt()
        prompt.on_submit = submitted.append
        _type(prompt, "hi")
        prompt.handle_input("\r")
        assert submitted == ["hi"]
        # Clearing is up to the owner
        assert prompt.value == "hi"


class TestRender:
    def test_prefix_and_value(self) -> None:
        prompt = Prompt()
        _type(prompt, "hi")
        assert prompt.render(20) == ["> hi"]

    def test_long_value_scrolls_to_cursor(self) -> None:
        prompt = Prompt()
        prompt.set_value("abcdefghijklmnopqrstuvwxyz")
        (line,) = prompt.render(12)
        assert visible_width(line) <= 12
        assert line.endswith("z")
        assert line.startswith("> ")

    def test_cursor_at_start_shows_beginning(self) -> None:
        prompt = Prompt()
        prompt.set_value("abcdefghijklmnopqrstuvwxyz")
        prompt.handle_input("\x1b[H")
        assert prompt.render(12) == ["> abcdefghij"]
