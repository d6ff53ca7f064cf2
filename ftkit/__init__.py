"""Character, byte, string, linked-list, printf-style formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "linked", "printf", "lines"]