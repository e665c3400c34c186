"""Thread-safe deque and stack containers."""

__version__ = "0.1.0"
__all__ = ["deque", "stack"]