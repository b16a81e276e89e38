"""Building blocks for an interactive line editor: edit commands, key parsing, highlighting and hints."""

__version__ = "0.1.0"