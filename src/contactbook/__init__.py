"""Single-user contact book with a text menu and file persistence."""

__version__ = "0.1.0"
