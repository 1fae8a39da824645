"""Character, number, byte-buffer, string, formatting, line-reading and linked-list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "convert",
    "output",
    "memory",
    "strings",
    "printf",
    "linereader",
    "linkedlist",
]