"""Data package for census-scatter.

This package contains CSV loading and numeric coercion.
"""

__all__ = [
    "loader",
]
