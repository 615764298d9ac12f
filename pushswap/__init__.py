"""Two-stack integer sorting with a limited instruction set, plus a checker."""

__version__ = "1.0.0"
__all__ = ["args", "bbeg", "checker", "mysort", "small_sorts", "sorter", "stacks"]