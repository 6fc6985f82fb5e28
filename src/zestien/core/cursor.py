"""
Cursor state machine for byte and nybble navigation.
"""

from typing import Tuple

from .buffer import Buffer, Nybble


class Cursor:
    """
    Points at one byte of a buffer and one of its nybbles.

    The cursor holds a byte index, not a nybble index; on_lower_nybble
    says which half of that byte is active for highlighting and for the
    next edit keystroke.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        self.byte_index = 0
        self.on_lower_nybble = False

    @property
    def half(self) -> Nybble:
        return Nybble.LOWER if self.on_lower_nybble else Nybble.UPPER

    @property
    def last_index(self) -> int:
        return self.length - 1

    def position(self, row_width: int) -> Tuple[int, int]:
        """Get the (column, row) of the cursor for a given row width."""
        return self.byte_index % row_width, self.byte_index // row_width

    def move_by(self, delta_bytes: int) -> None:
        """Move by a number of bytes, saturating at both ends."""
        self.byte_index = max(0, min(self.byte_index + delta_bytes, self.last_index))

    def move_nybble(self, forward: bool) -> None:
        """Move one nybble forward or backward."""

        # Stop the cursor bouncing between halves at either end of the buffer
        if forward and self.on_lower_nybble:
            if self.byte_index == self.last_index:
                return
            self.move_by(1)
        elif not forward and not self.on_lower_nybble:
            if self.byte_index == 0:
                return
            self.move_by(-1)

        self.on_lower_nybble = not self.on_lower_nybble

    def write_and_advance(self, value: int, buffer: Buffer) -> None:
        """Write a nybble under the cursor, then step one nybble forward."""

        buffer.write_nybble(self.byte_index, self.half, value)
        self.move_nybble(True)
