"""Small classic algorithms: backtracking, bit tricks, recursion, sorting and puzzles."""

__version__ = "0.1.0"
__all__ = ["backtracking", "bitwise", "recursion", "sorting", "problems"]