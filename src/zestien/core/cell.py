"""
Byte cells and their on-screen glyphs.
"""

from dataclasses import dataclass
from typing import Final, Optional, Tuple

from .errors import InvalidInput
from ..utils.hex_utils import nybble_to_hex

PLACEHOLDER_GLYPH: Final[str] = '~'
UNWRITTEN_ASCII: Final[str] = ' '
NON_PRINTABLE_ASCII: Final[str] = '.'


@dataclass(frozen=True)
class ByteCell:
    """
    One logical byte slot of the buffer.

    A cell either holds a concrete byte or is unwritten padding. Unwritten
    cells only ever appear after the file contents.
    """

    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.value is not None and not 0 <= self.value <= 0xFF:
            raise InvalidInput(f"Byte value must be between 0 and 255, got {self.value}")

    @classmethod
    def present(cls, value: int) -> 'ByteCell':
        return cls(value)

    @classmethod
    def unwritten(cls) -> 'ByteCell':
        return UNWRITTEN

    @property
    def is_present(self) -> bool:
        return self.value is not None


UNWRITTEN: Final[ByteCell] = ByteCell()


def render_cell(cell: ByteCell) -> Tuple[str, str, str]:
    """
    Map a cell to its display glyphs.

    Args:
        cell (ByteCell): Cell to render

    Returns:
        Tuple[str, str, str]: Upper nybble, lower nybble and ASCII glyph
    """

    if cell.value is None:
        return PLACEHOLDER_GLYPH, PLACEHOLDER_GLYPH, UNWRITTEN_ASCII

    value = cell.value
    ascii_glyph = chr(value) if 0x21 <= value <= 0x7E else NON_PRINTABLE_ASCII

    return nybble_to_hex(value >> 4), nybble_to_hex(value & 0x0F), ascii_glyph
