"""Degree lists, monomial ideals, Hilbert functions and help-file reading for graded modules."""

__version__ = "0.1.0"

__all__ = ["dlist", "monideal", "hilbert", "helpfile"]