"""Validation of .ber tile maps, with the string and buffer helpers it uses."""

__version__ = "0.1.0"