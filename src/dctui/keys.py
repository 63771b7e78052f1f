"""Matching raw terminal input against key identifiers.

Only the legacy (non-Kitty) encodings are recognised: plain characters,
``ctrl+<letter>``, ``alt+<char>`` and the named keys below.
"""

from __future__ import annotations

KeyId = str

_NAMED_KEYS: dict[KeyId, tuple[str, ...]] = {
    "enter": ("\r", "\n"),
    "tab": ("\t",),
    "shift+tab": ("\x1b[Z",),
    "escape": ("\x1b",),
    "backspace": ("\x7f", "\x08"),
    "delete": ("\x1b[3~",),
    "up": ("\x1b[A", "\x1bOA"),
    "down": ("\x1b[B", "\x1bOB"),
    "right": ("\x1b[C", "\x1bOC"),
    "left": ("\x1b[D", "\x1bOD"),
    "home": ("\x1b[H", "\x1bOH", "\x1b[1~"),
    "end": ("\x1b[F", "\x1bOF", "\x1b[4~"),
    "pageUp": ("\x1b[5~",),
    "pageDown": ("\x1b[6~",),
}


def _ctrl_char(letter: str) -> str | None:
    if len(letter) != 1 or not letter.isalpha() or not letter.isascii():
        return None
    return chr(ord(letter.lower()) & 0x1F)


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* is the encoding of *key_id*."""
    if key_id in _NAMED_KEYS:
        return data in _NAMED_KEYS[key_id]

    if key_id.startswith("ctrl+"):
        ctrl = _ctrl_char(key_id[5:])
        return ctrl is not None and data == ctrl

    if key_id.startswith("alt+"):
        rest = key_id[4:]
        if rest in _NAMED_KEYS:
            return any(data == "\x1b" + seq for seq in _NAMED_KEYS[rest])
        return len(rest) == 1 and data == "\x1b" + rest

    return len(key_id) == 1 and data == key_id


def is_printable(data: str) -> bool:
    """True for text that should be inserted as typed."""
    return bool(data) and not data.startswith("\x1b") and data.isprintable()
