"""hangquest: hangman with RPG progression."""

__version__ = "0.1.0"
