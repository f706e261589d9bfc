"""A small to-do tracker with a command line, web APIs and companion demo programs."""

__version__ = "0.1.0"