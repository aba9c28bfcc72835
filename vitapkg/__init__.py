"""Building blocks for PS Vita package management: zRIF, inflate, SHA-256, file, text and list logic."""

__version__ = "0.1.0"