"""Classic data structures and algorithms: containers, trees, sorting, searching and graphs."""

__version__ = "0.1.0"