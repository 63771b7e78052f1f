"""Terminal text utilities: ANSI handling, width measurement, word wrapping.

Everything here measures *visible* columns: escape sequences (SGR colours,
OSC 8 hyperlinks, APC payloads) are carried through untouched but never
count toward a line's width.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# CSI (ESC[ ... final), OSC (ESC] ... BEL/ST) and APC (ESC_ ... BEL/ST)
_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

_RESET = "\x1b[0m"
_TAB = "   "

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


# ---------------------------------------------------------------------------
# Width measurement
# ---------------------------------------------------------------------------


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from *text*."""
    return _ESCAPE_RE.sub("", text)


def _grapheme_width(g: str) -> int:
    """Return the terminal width of a single grapheme cluster."""
    if not g:
        return 0
    if g == "\t":
        return len(_TAB)

    first = ord(g[0])
    if len(g) == 1:
        if first < 0x20 or 0x7F <= first <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    # VS16, ZWJ sequences, skin tones and flags render as a wide emoji
    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2
    if first >= 0x1F000 or 0x2600 <= first <= 0x27BF:
        return 2
    if unicodedata.category(g[0]) in ("Mn", "Me", "Mc", "Cf"):
        return 0
    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    Tabs count as three columns. Pure printable ASCII takes a fast path,
    everything else is measured per grapheme cluster and cached.
    """
    if not text:
        return 0
    stripped = strip_ansi(text).replace("\t", _TAB)
    if not stripped:
        return 0
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = total
    return total


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Return ``(code, length)`` for the escape sequence at *pos*, or ``None``."""
    if pos >= len(text) or text[pos] != "\x1b":
        return None
    match = _ESCAPE_RE.match(text, pos)
    if match is None:
        return None
    code = match.group(0)
    return (code, len(code))


def _tokenize(line: str) -> list[tuple[str, bool]]:
    """Split *line* into ``(token, is_escape)`` pairs, one grapheme per token."""
    tokens: list[tuple[str, bool]] = []
    pos = 0
    for match in _ESCAPE_RE.finditer(line):
        if match.start() > pos:
            tokens.extend((g, False) for g in grapheme.graphemes(line[pos : match.start()]))
        tokens.append((match.group(0), True))
        pos = match.end()
    if pos < len(line):
        tokens.extend((g, False) for g in grapheme.graphemes(line[pos:]))
    return tokens


# ---------------------------------------------------------------------------
# SGR state
# ---------------------------------------------------------------------------

_SGR_ON = {
    1: "bold",
    2: "dim",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "inverse",
    8: "hidden",
    9: "strikethrough",
}
_SGR_OFF = {
    22: ("bold", "dim"),
    23: ("italic",),
    24: ("underline",),
    25: ("blink",),
    27: ("inverse",),
    28: ("hidden",),
    29: ("strikethrough",),
}


class AnsiCodeTracker:
    """Track the active SGR attributes so they can be re-opened after a break."""

    def __init__(self) -> None:
        self._attrs: dict[str, str] = {}
        self.fg_color: str | None = None
        self.bg_color: str | None = None

    def process(self, code: str) -> None:
        """Update tracked state from an SGR sequence like ``\\x1b[1;31m``."""
        if not code.startswith("\x1b[") or not code.endswith("m"):
            return

        params = code[2:-1].split(";") if code[2:-1] else ["0"]
        i = 0
        while i < len(params):
            val = int(params[i]) if params[i] else 0

            if val == 0:
                self.clear()
            elif val in _SGR_ON:
                self._attrs[_SGR_ON[val]] = f"\x1b[{val}m"
            elif val in _SGR_OFF:
                for name in _SGR_OFF[val]:
                    self._attrs.pop(name, None)
            elif 30 <= val <= 37 or 90 <= val <= 97:
                self.fg_color = f"\x1b[{val}m"
            elif 40 <= val <= 47 or 100 <= val <= 107:
                self.bg_color = f"\x1b[{val}m"
            elif val == 39:
                self.fg_color = None
            elif val == 49:
                self.bg_color = None
            elif val in (38, 48):
                # 38;5;N / 38;2;R;G;B and the 48 background forms
                mode = params[i + 1] if i + 1 < len(params) else ""
                if mode == "5" and i + 2 < len(params):
                    color = f"\x1b[{val};5;{params[i + 2]}m"
                    i += 2
                elif mode == "2" and i + 4 < len(params):
                    color = f"\x1b[{val};2;{';'.join(params[i + 2 : i + 5])}m"
                    i += 4
                else:
                    color = None
                    i += 1
                if color is not None:
                    if val == 38:
                        self.fg_color = color
                    else:
                        self.bg_color = color
            i += 1

    def clear(self) -> None:
        self._attrs.clear()
        self.fg_color = None
        self.bg_color = None

    def get_active_codes(self) -> str:
        """Return the codes that re-open the current state."""
        parts = list(self._attrs.values())
        if self.fg_color is not None:
            parts.append(self.fg_color)
        if self.bg_color is not None:
            parts.append(self.bg_color)
        return "".join(parts)

    def has_active_codes(self) -> bool:
        return bool(self._attrs) or self.fg_color is not None or self.bg_color is not None

    def get_line_end_reset(self) -> str:
        return _RESET if self.has_active_codes() else ""


# ---------------------------------------------------------------------------
# wrap_text_with_ansi
# ---------------------------------------------------------------------------


def wrap_text_with_ansi(text: str, width: int) -> list[str]:
    """Word-wrap *text* to *width* columns, preserving ANSI escape codes.

    Embedded newlines start a new physical line. Attributes that are still
    open at a break are closed at the end of the row and re-opened at the
    start of the next one. Returns at least one line.
    """
    if width <= 0:
        return [text]

    tracker = AnsiCodeTracker()
    result: list[str] = []
    for physical_line in text.split("\n"):
        result.extend(_wrap_single_line(physical_line, width, tracker))
    return result


def _wrap_single_line(line: str, width: int, tracker: AnsiCodeTracker) -> list[str]:
    if not line:
        return [""]

    rows: list[str] = []
    current: list[str] = []
    current_width = 0

    def reopen() -> list[str]:
        active = tracker.get_active_codes()
        return [active] if active else []

    current = reopen()
    for token, is_escape in _tokenize(line):
        if is_escape:
            tracker.process(token)
            current.append(token)
            continue

        if token == "\t":
            token_text, token_width = _TAB, len(_TAB)
        else:
            token_text, token_width = token, _grapheme_width(token)

        if current_width + token_width > width and current_width > 0:
            if token == " ":
                # Breaking on the space itself: close the row and drop it
                rows.append("".join(current) + tracker.get_line_end_reset())
                current = reopen()
                current_width = 0
                continue

            joined = "".join(current)
            split = _split_at_last_space(joined)
            if split is None:
                head, tail = joined, ""
            else:
                head, tail = split
            rows.append(head + tracker.get_line_end_reset())
            current = reopen()
            if tail:
                current.append(tail)
            current_width = visible_width(tail)

        current.append(token_text)
        current_width += token_width

    rows.append("".join(current) + tracker.get_line_end_reset())
    return rows


def _split_at_last_space(joined: str) -> tuple[str, str] | None:
    """Split *joined* at its last visible space.

    Returns ``(head, tail)`` with the space and any leading spaces of the
    tail removed, or ``None`` when there is no space past column zero.
    """
    last_space = strip_ansi(joined).rfind(" ")
    if last_space <= 0:
        return None

    visible_idx = 0
    pos = 0
    while pos < len(joined):
        extracted = extract_ansi_code(joined, pos)
        if extracted is not None:
            pos += extracted[1]
            continue
        if visible_idx == last_space:
            break
        visible_idx += 1
        pos += 1

    head = joined[:pos]
    tail: list[str] = []
    leading = True
    rest = joined[pos:]
    i = 0
    while i < len(rest):
        extracted = extract_ansi_code(rest, i)
        if extracted is not None:
            tail.append(extracted[0])
            i += extracted[1]
            continue
        if not (leading and rest[i] == " "):
            leading = False
            tail.append(rest[i])
        i += 1
    return (head, "".join(tail))


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


def truncate_to_width(
    text: str,
    max_width: int,
    ellipsis: str = "...",
    pad: bool = False,
) -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    The ellipsis counts toward the width. With *pad* the result is
    right-padded with spaces to exactly *max_width*.
    """
    if max_width <= 0:
        return ""

    text_width = visible_width(text)
    if text_width <= max_width:
        return text + " " * (max_width - text_width) if pad else text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return _take_columns(ellipsis, max_width)

    result = _take_columns(text, target)
    if "\x1b[" in result:
        result += _RESET
    result += ellipsis
    if pad:
        result += " " * max(0, max_width - visible_width(result))
    return result


def _take_columns(text: str, max_cols: int) -> str:
    """Return the longest prefix of *text* that fits in *max_cols* columns."""
    parts: list[str] = []
    cols = 0
    for token, is_escape in _tokenize(text):
        if is_escape:
            parts.append(token)
            continue
        w = _grapheme_width(token)
        if cols + w > max_cols:
            break
        parts.append(token)
        cols += w
    return "".join(parts)
