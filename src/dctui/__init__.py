"""dctui: paged, scrollable terminal UI for a chat client."""

# Backend collaborator
from dctui.backend import Backend, BackendError, Chat, EventSource, MemoryBackend, Message, load_backend

# Page content
from dctui.entries import Entry, MessageRef, entry_text

# Events
from dctui.events import EVENTS, UNKNOWN_EVENT, event_name

# Keybindings
from dctui.keybindings import DEFAULT_CHAT_KEYBINDINGS, ChatAction, ChatKeybindingsManager

# Pages and session
from dctui.pages import ChatPage, DebugPage, Page, PageKind, StatusPage
from dctui.prompt import Prompt
from dctui.session import SessionController

# Theme
from dctui.theme import ChatTheme, default_theme, plain_theme

# Utilities
from dctui.utils import truncate_to_width, visible_width, wrap_text_with_ansi
from dctui.view import ChatView

__all__ = [
    # Backend
    "Backend",
    "BackendError",
    "Chat",
    "EventSource",
    "MemoryBackend",
    "Message",
    "load_backend",
    # Entries
    "Entry",
    "MessageRef",
    "entry_text",
    # Events
    "EVENTS",
    "UNKNOWN_EVENT",
    "event_name",
    # Keybindings
    "DEFAULT_CHAT_KEYBINDINGS",
    "ChatAction",
    "ChatKeybindingsManager",
    # Pages
    "ChatPage",
    "DebugPage",
    "Page",
    "PageKind",
    "StatusPage",
    # Session and view
    "ChatView",
    "Prompt",
    "SessionController",
    # Theme
    "ChatTheme",
    "default_theme",
    "plain_theme",
    # Utilities
    "truncate_to_width",
    "visible_width",
    "wrap_text_with_ansi",
]
