"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

All output is captured in a buffer for assertions; the screen itself is not
emulated.
"""

from __future__ import annotations

from typing import Callable


class VirtualTerminal:
    """In-memory terminal that records all writes for test inspection."""

    def __init__(self, rows: int = 24, columns: int = 80) -> None:
        self._rows = rows
        self._columns = columns
        self._buffer: list[str] = []
        self._started = False
        self._input_handler: Callable[[str], None] | None = None
        self._resize_handler: Callable[[], None] | None = None
        self._cursor_visible = True
        self._title = ""

    # -- Terminal protocol --------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def started(self) -> bool:
        return self._started

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    def start(
        self,
        on_input: Callable[[str], None],
        on_resize: Callable[[], None],
    ) -> None:
        self._input_handler = on_input
        self._resize_handler = on_resize
        self._started = True

    def stop(self) -> None:
        self._started = False
        self._input_handler = None
        self._resize_handler = None

    def write(self, data: str) -> None:
        self._buffer.append(data)

    def hide_cursor(self) -> None:
        self._cursor_visible = False
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self._cursor_visible = True
        self.write("\x1b[?25h")

    def clear_screen(self) -> None:
        self.write("\x1b[2J\x1b[H")

    def move_to_row(self, row: int) -> None:
        self.write(f"\x1b[{row + 1};1H\x1b[2K")

    def set_title(self, title: str) -> None:
        self._title = title
        self.write(f"\x1b]0;{title}\x07")

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        return "".join(self._buffer)

    def clear_buffer(self) -> None:
        self._buffer.clear()

    def simulate_input(self, data: str) -> None:
        if self._input_handler is None:
            raise RuntimeError("No input handler registered -- call start() first")
        self._input_handler(data)

    def simulate_resize(self, rows: int | None = None, columns: int | None = None) -> None:
        if rows is not None:
            self._rows = rows
        if columns is not None:
            self._columns = columns
        if self._resize_handler is not None:
            self._resize_handler()
