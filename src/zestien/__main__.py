#!/usr/bin/python3

"""
Entry point for Zestien.
"""

import sys
import curses
import argparse
import logging
from typing import Optional, Sequence

from .core.buffer import Buffer
from .core.view import HexView
from .ui.window import WindowManager
from .ui.input_handler import InputHandler

log = logging.getLogger(__name__)

INPUT_TIMEOUT_MS = 100


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Zestien - Terminal Hex Viewer and Nybble Editor"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=HexView.VISIBLE_ROWS,
        help="Number of rows visible at once"
    )
    parser.add_argument(
        "--padding",
        type=int,
        default=HexView.PADDING,
        help="Margin around the hex grid"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write log messages to this file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug messages"
    )
    args = parser.parse_args(argv)

    if args.rows <= 0:
        parser.error("--rows must be positive")
    if args.padding < 0:
        parser.error("--padding must not be negative")

    return args


def setup_logging(log_file: Optional[str], debug: bool = False) -> None:
    """Send log records to a file; curses owns the terminal."""

    root = logging.getLogger()
    if not log_file:
        root.addHandler(logging.NullHandler())
        return

    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def setup_screen(stdscr: 'curses.window') -> None:
    """Configure the terminal; getch times out so status messages expire."""

    curses.use_default_colors()
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(INPUT_TIMEOUT_MS)


def run(stdscr: 'curses.window', view: HexView) -> None:
    """Main loop: draw, read one key, apply it."""

    setup_screen(stdscr)

    window_manager = WindowManager(stdscr, view)
    input_handler = InputHandler(window_manager)

    while True:
        current_height, current_width = stdscr.getmaxyx()
        if (current_height, current_width) != (window_manager.height, window_manager.width):
            window_manager.resize()

        window_manager.refresh_all()

        try:
            ch = stdscr.getch()
            if ch != -1:
                if not input_handler.handle_input(ch):
                    break
        except KeyboardInterrupt:
            break
        except curses.error:
            continue


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the application."""

    args = parse_args(argv)
    setup_logging(args.log_file, args.debug)

    try:
        buf = Buffer.from_file(args.file)
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    view = HexView(buf, visible_rows=args.rows, padding=args.padding)

    try:
        curses.wrapper(run, view)
    except ValueError as e:
        log.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
