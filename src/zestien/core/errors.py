"""
Exception types raised by the hex editing core.
"""


class ZestienError(Exception):
    """Base class for all editor errors."""


class OutOfRange(ZestienError, IndexError):
    """An index or row lies outside the buffer."""


class InvalidInput(ZestienError, ValueError):
    """A construction parameter or nybble value is malformed."""
