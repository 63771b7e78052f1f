"""Splits raw stdin chunks into one key sequence per event.

A single ``read`` can carry several keys (fast typing, a pasted line
ending in Enter, ``tmux send-keys``) or only part of an escape sequence.
Key matching works on whole sequences, so input is buffered until each
sequence is complete and then emitted one at a time.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Literal

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"

SequenceStatus = Literal["complete", "incomplete"]


def _string_command_status(data: str) -> SequenceStatus:
    # OSC may end in BEL; DCS and APC only in ST
    if data.endswith(f"{ESC}\\"):
        return "complete"
    if data[1] == "]" and data.endswith("\x07"):
        return "complete"
    return "incomplete"


def sequence_status(data: str) -> SequenceStatus:
    """Classify *data*, which starts with ESC, as a complete sequence or a prefix."""
    if len(data) == 1:
        return "incomplete"

    introducer = data[1]
    if introducer == "[":
        if len(data) < 3:
            return "incomplete"
        return "complete" if 0x40 <= ord(data[-1]) <= 0x7E else "incomplete"
    if introducer in "]P_":
        return _string_command_status(data)
    if introducer == "O":
        return "complete" if len(data) >= 3 else "incomplete"

    # ESC followed by one character: an alt-modified key
    return "complete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete key sequences.

    Returns ``(sequences, remainder)`` where *remainder* is a trailing
    escape sequence still waiting for more bytes.
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        if buffer[pos] != ESC:
            sequences.append(buffer[pos])
            pos += 1
            continue

        end = pos + 1
        while sequence_status(buffer[pos:end]) == "incomplete":
            if end >= len(buffer):
                return sequences, buffer[pos:]
            end += 1
        sequences.append(buffer[pos:end])
        pos = end

    return sequences, ""


class StdinBuffer:
    """Buffers stdin input and emits complete sequences.

    Bracketed pastes are collected whole and emitted once, still wrapped in
    their start and end markers. A lone ESC is held for *timeout* seconds
    before it is emitted as the Escape key.
    """

    def __init__(self, *, timeout: float = 0.01) -> None:
        self._buffer = ""
        self._timeout = timeout
        self._timeout_handle: asyncio.TimerHandle | None = None
        self._paste_buffer: str | None = None

        self.on_data: Callable[[str], None] | None = None

    def _emit(self, data: str) -> None:
        if self.on_data is not None:
            self.on_data(data)

    def _cancel_timeout(self) -> None:
        if self._timeout_handle is not None:
            self._timeout_handle.cancel()
            self._timeout_handle = None

    def process(self, data: str) -> None:
        """Feed a chunk read from stdin."""
        self._cancel_timeout()

        if self._paste_buffer is not None:
            self._paste_buffer += data
            self._finish_paste()
            return

        self._buffer += data
        start = self._buffer.find(BRACKETED_PASTE_START)
        if start != -1:
            before = self._buffer[:start]
            self._paste_buffer = self._buffer[start + len(BRACKETED_PASTE_START) :]
            self._buffer = ""
            sequences, _ = split_sequences(before)
            for sequence in sequences:
                self._emit(sequence)
            self._finish_paste()
            return

        sequences, self._buffer = split_sequences(self._buffer)
        for sequence in sequences:
            self._emit(sequence)

        if self._buffer:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                # No event loop, nothing would ever fire the timer
                self._flush_and_emit()
            else:
                self._timeout_handle = loop.call_later(self._timeout, self._flush_and_emit)

    def _finish_paste(self) -> None:
        if self._paste_buffer is None:
            return
        end = self._paste_buffer.find(BRACKETED_PASTE_END)
        if end == -1:
            return
        pasted = self._paste_buffer[:end]
        remaining = self._paste_buffer[end + len(BRACKETED_PASTE_END) :]
        self._paste_buffer = None
        self._emit(BRACKETED_PASTE_START + pasted + BRACKETED_PASTE_END)
        if remaining:
            self.process(remaining)

    def _flush_and_emit(self) -> None:
        for sequence in self.flush():
            self._emit(sequence)

    def flush(self) -> list[str]:
        """Return whatever is buffered as a single sequence and empty the buffer."""
        self._cancel_timeout()
        if not self._buffer:
            return []
        sequences = [self._buffer]
        self._buffer = ""
        return sequences

    def clear(self) -> None:
        self._cancel_timeout()
        self._buffer = ""
        self._paste_buffer = None

    @property
    def pending(self) -> str:
        return self._buffer
