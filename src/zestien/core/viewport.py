"""
Viewport tracking the visible row range.
"""

from .errors import InvalidInput


class Viewport:
    """Window of rows shown on screen, scrolled one row at a time."""

    def __init__(self, visible_row_count: int, scroll_row_offset: int = 0) -> None:
        if visible_row_count <= 0:
            raise InvalidInput(f"Visible row count must be positive, got {visible_row_count}")
        if scroll_row_offset < 0:
            raise InvalidInput(f"Scroll offset must not be negative, got {scroll_row_offset}")

        self.visible_row_count = visible_row_count
        self.scroll_row_offset = scroll_row_offset

    def reconcile(self, cursor_row: int) -> None:
        """Scroll by a single row if the cursor row left the window."""

        if cursor_row >= self.scroll_row_offset + self.visible_row_count:
            self.scroll_row_offset += 1
        elif cursor_row < self.scroll_row_offset:
            self.scroll_row_offset -= 1

    def visible_row_range(self) -> range:
        return range(self.scroll_row_offset, self.scroll_row_offset + self.visible_row_count)
