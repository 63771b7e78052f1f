"""Messaging backend interface and an in-memory implementation.

The page engine only ever talks to a :class:`Backend`. ``MemoryBackend``
keeps chats and messages in dictionaries, emits the same events a real
messaging core would, and can be seeded from a JSON fixture.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Protocol

from dctui.events import (
    DC_EVENT_CHAT_MODIFIED,
    DC_EVENT_INCOMING_MSG,
    DC_EVENT_MSGS_CHANGED,
)

logger = logging.getLogger(__name__)

EventListener = Callable[[int, Any, Any], None]


class BackendError(Exception):
    """Raised when the backend cannot carry out a lookup or a send."""


@dataclass(frozen=True)
class Message:
    id: int
    chat_id: int
    from_id: int
    text: str
    timestamp: int


@dataclass(frozen=True)
class Chat:
    id: int
    name: str


class Backend(Protocol):
    """The operations the page engine needs from a messaging core."""

    def get_message(self, msg_id: int) -> Message | None: ...

    def get_chat_list(self) -> list[int]: ...

    def get_chat_messages(self, chat_id: int, offset: int = 0, limit: int = 0) -> list[int]:
        """Message ids of *chat_id* in display order; ``0, 0`` is the whole history."""
        ...

    def send_text_message(self, chat_id: int, text: str) -> int: ...

    def get_chat(self, chat_id: int) -> Chat | None: ...


class EventSource(Protocol):
    """A backend that pushes events as ``(event, data1, data2)`` to listeners."""

    def subscribe(self, listener: EventListener) -> None: ...

    def unsubscribe(self, listener: EventListener) -> None: ...


class MemoryBackend:
    """Backend that keeps everything in process memory."""

    def __init__(self, self_id: int = 1, clock: Callable[[], float] = time.time) -> None:
        self.self_id = self_id
        self._clock = clock
        self._chats: dict[int, Chat] = {}
        self._history: dict[int, list[int]] = {}
        self._messages: dict[int, Message] = {}
        self._next_msg_id = 1
        self._listeners: list[EventListener] = []

    # -- events -------------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: int, data1: Any, data2: Any) -> None:
        for listener in list(self._listeners):
            listener(event, data1, data2)

    # -- chats --------------------------------------------------------------

    def add_chat(self, chat_id: int, name: str) -> Chat:
        if chat_id in self._chats:
            raise BackendError(f"chat {chat_id} already exists")
        chat = Chat(id=chat_id, name=name)
        self._chats[chat_id] = chat
        self._history[chat_id] = []
        return chat

    def rename_chat(self, chat_id: int, name: str) -> None:
        if chat_id not in self._chats:
            raise BackendError(f"no such chat: {chat_id}")
        self._chats[chat_id] = Chat(id=chat_id, name=name)
        self._emit(DC_EVENT_CHAT_MODIFIED, chat_id, 0)

    def get_chat(self, chat_id: int) -> Chat | None:
        return self._chats.get(chat_id)

    def get_chat_list(self) -> list[int]:
        return list(self._chats)

    # -- messages -----------------------------------------------------------

    def _store(self, chat_id: int, from_id: int, text: str, timestamp: int | None) -> Message:
        if chat_id not in self._chats:
            raise BackendError(f"no such chat: {chat_id}")
        if timestamp is None:
            timestamp = int(self._clock())
        msg = Message(
            id=self._next_msg_id,
            chat_id=chat_id,
            from_id=from_id,
            text=text,
            timestamp=timestamp,
        )
        self._next_msg_id += 1
        self._messages[msg.id] = msg
        self._history[chat_id].append(msg.id)
        return msg

    def add_message(
        self, chat_id: int, from_id: int, text: str, timestamp: int | None = None
    ) -> int:
        """Store an incoming message and announce it."""
        msg = self._store(chat_id, from_id, text, timestamp)
        self._emit(DC_EVENT_INCOMING_MSG, chat_id, msg.id)
        return msg.id

    def send_text_message(self, chat_id: int, text: str) -> int:
        msg = self._store(chat_id, self.self_id, text, None)
        logger.debug("sent message %d to chat %d", msg.id, chat_id)
        self._emit(DC_EVENT_MSGS_CHANGED, chat_id, msg.id)
        return msg.id

    def delete_message(self, msg_id: int) -> None:
        msg = self._messages.pop(msg_id, None)
        if msg is None:
            raise BackendError(f"no such message: {msg_id}")
        self._history[msg.chat_id].remove(msg_id)
        self._emit(DC_EVENT_MSGS_CHANGED, msg.chat_id, 0)

    def get_message(self, msg_id: int) -> Message | None:
        return self._messages.get(msg_id)

    def get_chat_messages(self, chat_id: int, offset: int = 0, limit: int = 0) -> list[int]:
        history = self._history.get(chat_id, [])
        if limit <= 0:
            return history[offset:]
        return history[offset : offset + limit]

    # -- fixtures -----------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemoryBackend:
        """Build a backend from ``{"self_id", "chats": [{"id", "name", "messages"}]}``."""
        backend = cls(self_id=int(data.get("self_id", 1)))
        for chat in data.get("chats", []):
            chat_id = int(chat["id"])
            backend.add_chat(chat_id, str(chat.get("name", chat_id)))
            for message in chat.get("messages", []):
                backend._store(
                    chat_id,
                    int(message.get("from", backend.self_id)),
                    str(message.get("text", "")),
                    message.get("timestamp"),
                )
        return backend


def load_backend(path: str | Path) -> MemoryBackend:
    """Load a JSON fixture into a new :class:`MemoryBackend`."""
    try:
        data = json.loads(Path(path).expanduser().read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise BackendError(f"cannot load {path}: {e}") from e
    if not isinstance(data, dict):
        raise BackendError(f"cannot load {path}: expected a JSON object")
    return MemoryBackend.from_dict(data)
