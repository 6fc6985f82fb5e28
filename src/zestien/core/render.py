"""
Row rendering module producing styled hex dump lines.

A styled line is a list of (token, text) pairs in the same shape Pygments
lexers emit, so the UI layer can map tokens to curses attributes the way
it would map syntax tokens to colors.
"""

from typing import Any, Final, List, Sequence, Tuple

from pygments.token import Token

from .cell import ByteCell, render_cell
from .cursor import Cursor
from ..utils.hex_utils import format_offset

Plain: Final = Token.Text
Emphasized: Final = Token.Cursor.Emphasized
Selected: Final = Token.Cursor.Selected

StyledLine = List[Tuple[Any, str]]

OFFSET_SEPARATOR: Final[str] = ': '
COLUMN_SEPARATOR: Final[str] = '| '


def row_length(row_width: int) -> int:
    """Number of screen columns a rendered row occupies."""
    return 8 + len(OFFSET_SEPARATOR) + 3 * row_width + len(COLUMN_SEPARATOR) + row_width


def _append(line: StyledLine, token: Any, text: str) -> None:
    if line and line[-1][0] == token:
        line[-1] = (token, line[-1][1] + text)
        return

    line.append((token, text))


def render_row(row: Sequence[ByteCell], row_index: int, cursor: Cursor) -> StyledLine:
    """
    Render one row as offset, hex column and ASCII column.

    On the cursor's row the cursor cell's active nybble and its ASCII glyph
    are tagged Emphasized and its inactive nybble Selected. Every other
    fragment is Plain.

    Args:
        row: Cells of the row, one full row width
        row_index (int): Index of the row in the buffer
        cursor (Cursor): Cursor to highlight

    Returns:
        StyledLine: Merged (token, text) fragments
    """

    row_width = len(row)
    cursor_col, cursor_row = cursor.position(row_width)
    highlight_col = cursor_col if row_index == cursor_row else -1

    glyphs = [render_cell(cell) for cell in row]
    line: StyledLine = []

    _append(line, Plain, format_offset(row_index * row_width) + OFFSET_SEPARATOR)

    for col, (upper, lower, _) in enumerate(glyphs):
        if col != highlight_col:
            _append(line, Plain, f"{upper}{lower} ")
            continue

        _append(line, Selected if cursor.on_lower_nybble else Emphasized, upper)
        _append(line, Emphasized if cursor.on_lower_nybble else Selected, lower)
        _append(line, Plain, ' ')

    _append(line, Plain, COLUMN_SEPARATOR)

    for col, (_, _, ascii_glyph) in enumerate(glyphs):
        _append(line, Emphasized if col == highlight_col else Plain, ascii_glyph)

    return line


def plain_text(line: StyledLine) -> str:
    """Join the fragments of a styled line into its text."""
    return ''.join(text for _, text in line)
