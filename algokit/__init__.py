"""Classic data structures and graph, tree and dynamic-programming algorithms."""

__version__ = "0.1.0"