"""Classic algorithm routines for lists, matrices and strings."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "hashing",
    "matrix",
    "searching",
    "triangle",
    "sorting",
    "strings",
    "two_pointer",
]