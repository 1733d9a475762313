"""Two-stack integer sorting with push, swap and rotate operations, plus small text and buffer helpers."""

__version__ = "0.1.0"