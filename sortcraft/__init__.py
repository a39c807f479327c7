"""Classic sorting algorithms with pluggable comparators, linked lists and timing."""

__version__ = "0.1.0"