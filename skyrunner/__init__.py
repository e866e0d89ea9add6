"""A finite side-scrolling runner game: maps, world logic, pygame screens and the command."""

__version__ = "0.1.0"