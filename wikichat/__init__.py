"""wikichat - answer questions from Wikipedia."""

__version__ = "0.1.0"
