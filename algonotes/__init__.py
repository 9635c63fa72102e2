"""Classic algorithms and data structures: searching, graphs, trees, linked lists, strings, numbers and dynamic programming."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dynamic",
    "graphs",
    "linked",
    "numbers",
    "structures",
    "text",
    "trees",
]