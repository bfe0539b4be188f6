"""Classic data structures and algorithms: sorting, searching, linked lists, trees, heaps, graphs and tries."""

__version__ = "0.1.0"