"""
Domain models and value objects.

Contains the Vector2 value object and its constructor/accessor functions.
"""

from src.calcmath.domain.vector import Vector2, vec, x, y

__all__ = [
    "Vector2",
    "vec",
    "x",
    "y",
]
