"""Character, number, buffer, string, linked-list and formatted-output utilities."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numeric",
    "memory",
    "linkedlist",
    "text_search",
    "text_build",
    "output",
    "printf",
]