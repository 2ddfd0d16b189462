"""Binary search routines for sorted and rotated sorted sequences, with a small command line tool."""

__version__ = "0.1.0"

__all__ = ["bounds", "cli", "occurrences", "rotated", "search"]