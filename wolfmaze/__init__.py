"""Tile-based escape game with map validation, an XPM reader and a pygame front end."""

__version__ = "1.0.0"