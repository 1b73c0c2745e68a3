"""Advent of Code puzzle solvers, one module per year and day."""

__version__ = "0.1.0"