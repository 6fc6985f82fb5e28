"""
Utility functions for hex digit conversion.
"""

from typing import Final, Optional

HEX_DIGITS: Final[str] = '0123456789abcdef'


def nybble_to_hex(nybble: int) -> str:
    """
    Convert a 4-bit value to its lowercase hex digit.

    Args:
        nybble (int): Value between 0 and 15

    Returns:
        str: Single hex digit
    """

    if not 0 <= nybble <= 0x0F:
        raise ValueError(f"Nybbles are always 0x0f or less, received {nybble}")

    return HEX_DIGITS[nybble]


def hex_digit_value(char: str) -> Optional[int]:
    """
    Parse a single hex digit character.

    Args:
        char (str): Character to parse, either case

    Returns:
        int: Digit value or None if the character is not a hex digit
    """

    if len(char) != 1:
        return None

    index = HEX_DIGITS.find(char.lower())
    if index < 0:
        return None

    return index


def is_hex_char(ch: int) -> bool:
    """Check if a key code is a valid hex digit."""
    return (0x30 <= ch <= 0x39) or (0x41 <= ch <= 0x46) or (0x61 <= ch <= 0x66)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a lowercase hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}x}"
