"""Classroom algorithms: a d-ary heap, binary-search exercises, graph cycles and small contest problems."""

__version__ = "0.1.0"
__all__ = ["dheap", "math_utils", "search", "party", "graph", "estimation"]