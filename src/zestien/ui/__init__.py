"""
UI package for the curses hex editor interface.

This package paints the hex grid with the WindowManager and decodes
keyboard input with the InputHandler.
"""

from .window import WindowManager
from .input_handler import InputHandler

__all__ = ['WindowManager', 'InputHandler']
