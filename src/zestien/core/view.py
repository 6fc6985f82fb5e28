"""
Hex view session tying buffer, cursor and viewport together.
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .buffer import Buffer
from .cursor import Cursor
from .render import StyledLine, render_row, row_length
from .viewport import Viewport
from ..utils.hex_utils import hex_digit_value

log = logging.getLogger(__name__)


class EventKind(enum.Enum):
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'
    HEX_DIGIT = 'hex_digit'


@dataclass(frozen=True)
class Event:
    """A decoded input event."""

    kind: EventKind
    digit: Optional[int] = None

    @classmethod
    def hex_digit(cls, char: str) -> Optional['Event']:
        """Build an edit event, or None if char is not a hex digit."""

        value = hex_digit_value(char)
        if value is None:
            return None

        return cls(EventKind.HEX_DIGIT, value)


LEFT = Event(EventKind.LEFT)
RIGHT = Event(EventKind.RIGHT)
UP = Event(EventKind.UP)
DOWN = Event(EventKind.DOWN)


class EventResult(enum.Enum):
    CONSUMED = 'consumed'
    IGNORED = 'ignored'


class HexView:
    """
    Editing session over one buffer.

    Every event is applied to the cursor and buffer, then the viewport is
    reconciled, before the next redraw.
    """

    VISIBLE_ROWS = 10
    PADDING = 2

    def __init__(self, buffer: Buffer, visible_rows: int = VISIBLE_ROWS, padding: int = PADDING) -> None:
        self.buffer = buffer
        self.cursor = Cursor(len(buffer))
        self.viewport = Viewport(visible_rows)
        self.padding = padding

    @property
    def row_width(self) -> int:
        return self.buffer.row_width

    @property
    def modified(self) -> bool:
        return self.buffer.modified

    def cursor_row(self) -> int:
        return self.cursor.byte_index // self.row_width

    def on_left(self) -> EventResult:
        self.cursor.move_nybble(False)
        return self._settle()

    def on_right(self) -> EventResult:
        self.cursor.move_nybble(True)
        return self._settle()

    def on_up(self) -> EventResult:
        self.cursor.move_by(-self.row_width)
        return self._settle()

    def on_down(self) -> EventResult:
        self.cursor.move_by(self.row_width)
        return self._settle()

    def on_hex_digit(self, value: int) -> EventResult:
        self.cursor.write_and_advance(value, self.buffer)
        return self._settle()

    def on_event(self, event: Event) -> EventResult:
        """Dispatch a decoded event to its handler."""

        if event.kind is EventKind.LEFT:
            return self.on_left()
        if event.kind is EventKind.RIGHT:
            return self.on_right()
        if event.kind is EventKind.UP:
            return self.on_up()
        if event.kind is EventKind.DOWN:
            return self.on_down()
        if event.kind is EventKind.HEX_DIGIT and event.digit is not None:
            return self.on_hex_digit(event.digit)

        log.debug("Ignored event %r", event)
        return EventResult.IGNORED

    def _settle(self) -> EventResult:
        self.viewport.reconcile(self.cursor_row())
        return EventResult.CONSUMED

    def generate_text(self) -> List[StyledLine]:
        """Render the rows inside the viewport."""

        lines = []
        for row_index in self.viewport.visible_row_range():
            if row_index >= self.buffer.row_count:
                break
            lines.append(render_row(self.buffer.row_of(row_index), row_index, self.cursor))

        return lines

    def required_size(self) -> Tuple[int, int]:
        """Get the (columns, rows) the grid needs including padding."""

        return (
            row_length(self.row_width) + 2 * self.padding,
            self.viewport.visible_row_count + 2 * self.padding
        )

    def status_line(self) -> str:
        lower = 'true' if self.cursor.on_lower_nybble else 'false'
        status = f"cursor: {self.cursor.byte_index} (lower: {lower})"

        if self.modified:
            status += " [Modified]"

        return status
