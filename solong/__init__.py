"""A tile-based collect-and-escape puzzle game: map checking, game rules,
XPM texture reading and a pygame window to play in."""

__version__ = "0.1.0"