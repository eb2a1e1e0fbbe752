"""Averages of blood sugar readings read from a CSV log, with an interactive command."""

__version__ = "0.1.0"