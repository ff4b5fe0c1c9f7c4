"""Dodo - a line-oriented personal task manager backed by a plain text file."""

__version__ = "0.1.0"
