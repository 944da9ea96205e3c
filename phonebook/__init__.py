"""An eight-slot interactive phone book and a megaphone that shouts."""

__version__ = "1.0.0"