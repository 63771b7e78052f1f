"""Logging glue: the file log and a handler that writes to the status page."""

from __future__ import annotations

import logging
from pathlib import Path

from dctui.session import SessionController

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class StatusPageHandler(logging.Handler):
    """Appends formatted records to the session's status page."""

    def __init__(self, session: SessionController, level: int = logging.WARNING) -> None:
        super().__init__(level)
        self._session = session
        self.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._session.append_status(self.format(record))
        except Exception:
            self.handleError(record)


def setup_logging(level: str, log_file: str | Path) -> None:
    """Send all records to *log_file*; the terminal belongs to the UI."""
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        filename=str(path),
    )
