"""Cursor-based parsing of little-endian binary data with a position stack."""

__version__ = "0.2.0"
__all__ = ["binary_cursor"]