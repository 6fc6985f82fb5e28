"""
Core package for the hex editing engine.

This package implements the data model and rendering of the editor: the
Buffer of byte cells, the Cursor state machine, the Viewport that keeps the
cursor on screen, and the row renderer that turns them into styled text.
"""

from .buffer import Buffer, Nybble
from .cell import ByteCell, render_cell
from .cursor import Cursor
from .errors import InvalidInput, OutOfRange, ZestienError
from .render import render_row
from .view import Event, EventResult, HexView
from .viewport import Viewport

__all__ = [
    'Buffer',
    'Nybble',
    'ByteCell',
    'render_cell',
    'Cursor',
    'InvalidInput',
    'OutOfRange',
    'ZestienError',
    'render_row',
    'Event',
    'EventResult',
    'HexView',
    'Viewport'
]
