"""Compact implementations of classic array, search, string, number, graph, tree and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "linked", "numbers", "search", "strings", "trees"]