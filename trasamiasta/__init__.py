"""Shortest road routes between cities, with a command and a Tkinter map window."""

__version__ = "0.1.0"