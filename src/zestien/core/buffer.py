"""
Buffer module for holding and overwriting hex data.
"""

import enum
import logging
from typing import Iterable, Iterator, List, Optional

from .cell import ByteCell, UNWRITTEN
from .errors import InvalidInput, OutOfRange

log = logging.getLogger(__name__)


class Nybble(enum.Enum):
    """Which 4-bit half of a byte is addressed."""

    UPPER = 'upper'
    LOWER = 'lower'

    @property
    def shift(self) -> int:
        return 4 if self is Nybble.UPPER else 0

    @property
    def keep_mask(self) -> int:
        """Mask of the bits a write to this half leaves untouched."""
        return 0x0F if self is Nybble.UPPER else 0xF0


class Buffer:
    """
    Fixed-length sequence of byte cells laid out in rows.

    The buffer is padded with unwritten cells so every row is full, and it
    never changes length after construction. Editing is overwrite-only,
    one nybble at a time.
    """

    BYTE_WIDTH = 16

    def __init__(self, cells: List[ByteCell], row_width: int = BYTE_WIDTH) -> None:
        if row_width <= 0:
            raise InvalidInput(f"Row width must be positive, got {row_width}")
        if not cells or len(cells) % row_width:
            raise InvalidInput("Cell count must be a positive multiple of the row width")

        self.cells = cells
        self.row_width = row_width
        self.modified = False
        self.filename: Optional[str] = None

    @classmethod
    def load(cls, data: Iterable[int], row_width: int = BYTE_WIDTH) -> 'Buffer':
        """
        Wrap raw bytes, padding with unwritten cells.

        At least one unwritten cell always follows the data, so a length
        that already fills its rows gains a whole padding row.

        Args:
            data: Raw byte values
            row_width (int): Cells per row

        Returns:
            Buffer: The padded buffer
        """

        if row_width <= 0:
            raise InvalidInput(f"Row width must be positive, got {row_width}")

        cells = [ByteCell.present(b) for b in data]
        padding = row_width - (len(cells) % row_width)
        cells.extend([UNWRITTEN] * padding)

        log.debug("Loaded %d bytes with %d padding cells", len(cells) - padding, padding)
        return cls(cells, row_width)

    @classmethod
    def from_file(cls, filename: str, row_width: int = BYTE_WIDTH) -> 'Buffer':
        """Load a buffer from a file. Read errors propagate to the caller."""

        with open(filename, 'rb') as f:
            data = f.read()

        buf = cls.load(data, row_width)
        buf.filename = filename
        log.info("Opened %s (%d bytes)", filename, len(data))
        return buf

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> ByteCell:
        self._check_index(index)
        return self.cells[index]

    def __iter__(self) -> Iterator[ByteCell]:
        return iter(self.cells)

    @property
    def row_count(self) -> int:
        return len(self.cells) // self.row_width

    def row_of(self, row_index: int) -> List[ByteCell]:
        """Get the full row of cells at the given row index."""

        if not 0 <= row_index < self.row_count:
            raise OutOfRange(f"Row {row_index} outside [0, {self.row_count})")

        start = row_index * self.row_width
        return self.cells[start:start + self.row_width]

    def write_nybble(self, index: int, half: Nybble, value: int) -> None:
        """
        Replace one nybble of the byte at index.

        An unwritten cell is promoted to a zero byte before the write, so
        the other half of a freshly written cell is always 0.

        Args:
            index (int): Cell index
            half (Nybble): Which half to replace
            value (int): New nybble value between 0 and 15
        """

        self._check_index(index)
        if not 0 <= value <= 0x0F:
            raise InvalidInput(f"Nybble value must be between 0 and 15, got {value}")

        old = self.cells[index].value
        if old is None:
            old = 0

        new = (old & half.keep_mask) | (value << half.shift)
        self.cells[index] = ByteCell.present(new)
        self.modified = True

        log.debug("Wrote %s nybble %x at %d: %02x -> %02x", half.value, value, index, old, new)

    def to_bytes(self) -> bytes:
        """
        Serialize the buffer contents.

        Trailing unwritten cells are dropped; unwritten cells before the
        last written one are stored as zero bytes.
        """

        end = len(self.cells)
        while end > 0 and not self.cells[end - 1].is_present:
            end -= 1

        return bytes(cell.value or 0 for cell in self.cells[:end])

    def save_file(self, filename: Optional[str] = None) -> bool:
        """
        Save data to a file.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Returns:
            bool: True if save was successful, False if no filename is known
        """

        save_filename = filename or self.filename
        if not save_filename:
            return False

        data = self.to_bytes()
        try:
            with open(save_filename, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise IOError(f"Failed to save file: {str(e)}") from e

        self.filename = save_filename
        self.modified = False
        log.info("Saved %d bytes to %s", len(data), save_filename)
        return True

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.cells):
            raise OutOfRange(f"Index {index} outside [0, {len(self.cells)})")
