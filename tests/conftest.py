from __future__ import annotations

import pytest

from dctui.backend import MemoryBackend
from dctui.session import SessionController
from dctui.theme import plain_theme


@pytest.fixture
def backend() -> MemoryBackend:
    backend = MemoryBackend(self_id=1, clock=lambda: 1000)
    backend.add_chat(10, "friends")
    backend.add_chat(42, "work")
    backend.add_message(10, 2, "hi there", timestamp=100)
    backend.add_message(42, 3, "standup?", timestamp=200)
    backend.add_message(10, 1, "hello", timestamp=300)
    return backend


@pytest.fixture
def session(backend: MemoryBackend) -> SessionController:
    return SessionController(backend, debug=True, theme=plain_theme())
