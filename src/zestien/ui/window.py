"""
Window management module for the hex editor UI.
"""

import curses
import logging
import time
from typing import Any, Dict, Final, Optional, Tuple

from ..core.render import Emphasized, Selected, StyledLine
from ..core.view import HexView

log = logging.getLogger(__name__)

CURSOR_COLORS: Final[Dict[str, int]] = {
    'emphasized': 1,   # Bright cyan on blue
    'selected': 2,     # White on blue
    'status': 3,       # Status bar
    'error': 4,        # Error messages
}

TOKEN_COLOR_MAP: Final[Dict[Any, int]] = {
    Emphasized: CURSOR_COLORS['emphasized'],
    Selected: CURSOR_COLORS['selected'],
}


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


def token_attr(token_type: Any) -> int:
    """
    Get the curses attribute for a render token.

    Args:
        token_type: The Pygments token type

    Returns:
        The curses attribute, plain for unknown tokens
    """

    while token_type is not None:
        if token_type in TOKEN_COLOR_MAP:
            return curses.color_pair(TOKEN_COLOR_MAP[token_type]) | curses.A_BOLD
        token_type = token_type.parent

    return curses.A_NORMAL


class WindowManager:
    """Paints the status line and the hex grid panel."""

    STATUS_MESSAGE_DURATION = 3

    def __init__(self, stdscr: 'curses.window', view: HexView):
        self.stdscr = stdscr
        self.view = view
        self.height, self.width = stdscr.getmaxyx()

        min_width, min_height = self.min_size()
        if self.height < min_height or self.width < min_width:
            raise ValueError(
                f"Terminal too small. Minimum size: {min_width}x{min_height}, "
                f"Current size: {self.width}x{self.height}"
            )

        self.status_window: Optional['curses.window'] = None
        self.panel_window: Optional['curses.window'] = None
        self.status_message: Optional[str] = None
        self.status_message_time = 0.0

        curses.start_color()
        curses.init_pair(CURSOR_COLORS['emphasized'], curses.COLOR_CYAN, curses.COLOR_BLUE)
        curses.init_pair(CURSOR_COLORS['selected'], curses.COLOR_WHITE, curses.COLOR_BLUE)
        curses.init_pair(CURSOR_COLORS['status'], curses.COLOR_WHITE, -1)
        curses.init_pair(CURSOR_COLORS['error'], curses.COLOR_RED, -1)

        self.setup_windows()

    def min_size(self) -> Tuple[int, int]:
        """Get the (columns, rows) needed: the panel, its border and the status line."""

        width, height = self.view.required_size()
        return width + 2, height + 3

    def setup_windows(self) -> None:
        """Create and position all windows."""

        min_width, min_height = self.min_size()
        if self.height < min_height or self.width < min_width:
            return

        self.status_window = curses.newwin(1, self.width, 0, 0)
        self.panel_window = curses.newwin(min_height - 1, min_width, 1, 0)

    def refresh_all(self) -> None:
        """Refresh all windows."""

        self.draw_panel()
        self.draw_status()
        curses.doupdate()

    def draw_panel(self) -> None:
        """Draw the boxed hex grid."""

        if not self.panel_window:
            return

        self.panel_window.erase()
        self.panel_window.box()

        origin = 1 + self.view.padding
        for y, line in enumerate(self.view.generate_text()):
            self.draw_styled_line(self.panel_window, origin + y, origin, line)

        self.panel_window.noutrefresh()

    def draw_styled_line(self, window: 'curses.window', y: int, x: int, line: StyledLine) -> None:
        """Draw (token, text) fragments left to right."""

        for token_type, text in line:
            safe_addstr(window, y, x, text, token_attr(token_type))
            x += len(text)

    def draw_status(self) -> None:
        """Draw the status line."""

        if not self.status_window:
            return

        self.status_window.erase()

        if self.status_message:
            if self.status_message_time == 0:
                self.status_message_time = time.time()
            elif time.time() - self.status_message_time > self.STATUS_MESSAGE_DURATION:
                self.status_message = None
                self.status_message_time = 0

        if self.status_message:
            attr = curses.color_pair(CURSOR_COLORS['status'])
            if self.status_message.startswith("Error:"):
                attr = curses.color_pair(CURSOR_COLORS['error']) | curses.A_BOLD
            safe_addstr(self.status_window, 0, 0, self.status_message, attr)
        else:
            safe_addstr(self.status_window, 0, 0, self.view.status_line())

        self.status_window.noutrefresh()

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()
        self.stdscr.clear()
        self.stdscr.noutrefresh()

        min_width, min_height = self.min_size()
        if self.height < min_height or self.width < min_width:
            log.warning("Terminal resized below %dx%d", min_width, min_height)
            self.status_window = curses.newwin(1, self.width, 0, 0) if self.height and self.width else None
            self.panel_window = None
            self.status_message = "Error: Terminal too small"
            return

        self.setup_windows()
