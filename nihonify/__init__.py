"""Conversion between Gregorian dates and Japanese era names (nengou)."""

__version__ = "0.1.0"
