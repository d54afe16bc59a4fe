"""Evasion bot for the Code of Kutulu grid game."""

__version__ = "0.1.0"
