"""Data structures and general utilities: bubble sort, a hash map, growable vectors and string arrays, string helpers, file printing and reference tables."""

__version__ = "1.0.0"