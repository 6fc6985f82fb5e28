"""
Input handler module for processing keyboard events.
"""

import curses
import logging
from typing import Callable, Dict, Final, Optional

from ..core.view import DOWN, LEFT, RIGHT, UP, Event, EventResult, HexView
from ..utils.hex_utils import is_hex_char
from .window import WindowManager

log = logging.getLogger(__name__)

UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = "Buffer has unsaved changes. Press Ctrl+S to save or Ctrl+X again to discard changes."
NO_FILENAME_STATUS_MESSAGE: Final[str] = "Error: No filename specified"


class InputHandler:
    """Decodes keys into view events and runs editor commands."""

    def __init__(self, window_manager: WindowManager) -> None:
        self.window_manager = window_manager
        self.quit_warning_shown = False
        self.key_events: Dict[int, Event] = {
            curses.KEY_LEFT: LEFT,
            curses.KEY_RIGHT: RIGHT,
            curses.KEY_UP: UP,
            curses.KEY_DOWN: DOWN,
        }
        self.command_handlers: Dict[int, Callable[[], bool]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[int, Callable[[], bool]]:
        """Set up the keyboard command handlers."""

        return {
            ord('x') & 0x1f: self._quit,  # Ctrl + X (quit key)
            ord('w') & 0x1f: self._save,  # Ctrl + W (save key)
            ord('s') & 0x1f: self._save,  # Ctrl + S (save key)
        }

    @property
    def view(self) -> HexView:
        return self.window_manager.view

    def decode(self, ch: int) -> Optional[Event]:
        """Translate a key code into a view event, or None."""

        if ch in self.key_events:
            return self.key_events[ch]

        if is_hex_char(ch):
            return Event.hex_digit(chr(ch))

        return None

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        if ch == curses.KEY_RESIZE:
            self.window_manager.resize()
            return True

        if ch in self.command_handlers:
            return self.command_handlers[ch]()

        event = self.decode(ch)
        if event is None or self.view.on_event(event) is EventResult.IGNORED:
            log.debug("Ignored key %d", ch)
            return True

        self.quit_warning_shown = False
        return True

    def _quit(self) -> bool:
        """Quit, asking for a second press when there are unsaved changes."""

        if self.view.modified and not self.quit_warning_shown:
            self.quit_warning_shown = True
            self.window_manager.status_message = UNSAVED_CHANGES_STATUS_MESSAGE
            return True

        log.info("Quitting")
        return False

    def _save(self) -> bool:
        """Save the current buffer."""

        buf = self.view.buffer
        try:
            if buf.save_file():
                self.window_manager.status_message = f"Saved: {buf.filename}"
                self.quit_warning_shown = False
                return True

            self.window_manager.status_message = NO_FILENAME_STATUS_MESSAGE
        except IOError as e:
            log.error("Save failed: %s", e)
            self.window_manager.status_message = f"Error: {str(e)}"

        return True
