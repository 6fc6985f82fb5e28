"""
Zestien - a terminal hex viewer and nybble editor.
"""

__version__ = "0.1.0"
