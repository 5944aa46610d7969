"""Slice a sprite map into one PNG file per non-empty frame."""

__version__ = "1.0.0"
