"""Two-stack sorting with the push_swap operation set, plus small text and data helpers."""

__version__ = "0.1.0"