"""Parsing and validation of .cub scene description files."""

__version__ = "0.1.0"