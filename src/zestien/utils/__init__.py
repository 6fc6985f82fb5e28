"""
Utility package for hex digit helpers.
"""

from .hex_utils import (
    nybble_to_hex,
    hex_digit_value,
    is_hex_char,
    format_offset
)

__all__ = [
    'nybble_to_hex',
    'hex_digit_value',
    'is_hex_char',
    'format_offset'
]
