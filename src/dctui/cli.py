"""Entry point for the dctui command."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dctui.backend import BackendError, MemoryBackend, load_backend
from dctui.config import LOG_LEVELS, get_config_dir, load_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="dctui: terminal chat client")
    parser.add_argument(
        "fixture",
        nargs="?",
        default=None,
        help="JSON file with chats and messages to load into the in-memory backend",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Show the event log page")
    parser.add_argument("--config", default=None, help="Config file (default: ~/.dctui/config.json)")
    parser.add_argument("--log-level", default=None, choices=list(LOG_LEVELS))
    parser.add_argument("--log-file", default=None, help="Log file (default: ~/.dctui/dctui.log)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    from dctui.log import StatusPageHandler, setup_logging

    setup_logging(
        args.log_level or config.log_level,
        args.log_file or config.log_file or get_config_dir() / "dctui.log",
    )

    if args.fixture:
        try:
            backend = load_backend(args.fixture)
        except BackendError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        backend = MemoryBackend()

    from dctui.app import ChatApp, run
    from dctui.keybindings import ChatKeybindingsManager
    from dctui.session import SessionController
    from dctui.terminal import ProcessTerminal
    from dctui.view import ChatView, help_line

    debug = args.debug if args.debug is not None else config.debug
    session = SessionController(backend, debug=debug)
    logging.getLogger("dctui").addHandler(StatusPageHandler(session))

    keybindings = ChatKeybindingsManager(config.keybindings)
    session.append_status(help_line(keybindings))
    session.load_chats()
    logger.info("loaded %d chats", len(session.pages) - (2 if debug else 1))

    view = ChatView(session, keybindings)
    app = ChatApp(ProcessTerminal(), view, backend)
    asyncio.run(run(app))
    return 0


if __name__ == "__main__":
    sys.exit(main())
