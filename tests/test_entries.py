"""Tests for MessageRef resolution."""

from __future__ import annotations

from dctui.backend import MemoryBackend
from dctui.entries import MessageRef, display_safe, entry_text
from dctui.session import SessionController
from dctui.theme import ChatTheme, plain_theme


class TestMessageRef:
    def test_renders_sender_timestamp_and_text(self, backend: MemoryBackend) -> None:
        ref = MessageRef(2, backend, plain_theme())
        assert str(ref) == "200:[3] > standup?"

    def test_newlines_are_stripped(self, backend: MemoryBackend) -> None:
        msg_id = backend.add_message(10, 2, "multi\nline\r\ntext", timestamp=5)
        assert MessageRef(msg_id, backend, plain_theme()).render() == "5:[2] > multilinetext"

    def test_resolved_on_every_render(self, backend: MemoryBackend) -> None:
        ref = MessageRef(1, backend, plain_theme())
        first = ref.render()
        backend.delete_message(1)
        assert first != ref.render()

    def test_missing_message_placeholder(self, backend: MemoryBackend) -> None:
        assert MessageRef(404, backend, plain_theme()).render() == "[message 404 not found]"

    def test_timestamp_is_styled(self, backend: MemoryBackend) -> None:
        theme = ChatTheme(timestamp=lambda text: f"<{text}>")
        assert MessageRef(1, backend, theme).render() == "<100>:[2] > hi there"

    def test_terminal_controls_are_removed(self, backend: MemoryBackend) -> None:
        msg_id = backend.add_message(10, 2, "hey\x1b[2J\x1b]0;pwned\x07\x1b[H", timestamp=5)
        assert MessageRef(msg_id, backend, plain_theme()).render() == "5:[2] > hey"

    def test_controls_removed_before_wrapping(self, backend: MemoryBackend) -> None:
        session = SessionController(backend, theme=plain_theme())
        session.load_chats()
        msg_id = backend.add_message(10, 2, "hey\x1b[2J\x1b[31mred\x1b[0m")
        page = session.chat_page(10)
        assert page is not None
        page.append_message(msg_id)
        assert "\x1b" not in page.render(40, 1)[0]

    def test_default_theme_colors_timestamp(self, backend: MemoryBackend) -> None:
        assert MessageRef(1, backend).render().startswith("\x1b[33m100\x1b[0m")


class TestEntryText:
    def test_plain_string_passthrough(self) -> None:
        assert entry_text("plain") == "plain"

    def test_reference_is_materialized(self, backend: MemoryBackend) -> None:
        assert entry_text(MessageRef(1, backend, plain_theme())) == "100:[2] > hi there"


class TestDisplaySafe:
    def test_plain_text_untouched(self) -> None:
        assert display_safe("héllo wörld\tok") == "héllo wörld\tok"

    def test_line_breaks_removed(self) -> None:
        assert display_safe("a\r\nb\nc") == "abc"

    def test_escape_sequences_removed(self) -> None:
        assert display_safe("\x1b[?1049h\x1bPq#0\x1b\\x\x1b_Gf=1\x07y\x1b7z") == "xyz"

    def test_c0_and_c1_controls_removed(self) -> None:
        assert display_safe("a\x00b\x07c\x9bd\x7fe") == "abcde"

    def test_lone_escape_removed(self) -> None:
        assert display_safe("end\x1b") == "end"
