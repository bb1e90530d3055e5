"""Building blocks for a terminal text editor: highlighting rules, modes, window layouts, settings and text helpers."""

__version__ = "0.2.0"