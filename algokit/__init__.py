"""Sorting, searching, hashing, tries, range-query trees, graphs and contest solvers."""

__version__ = "0.1.0"