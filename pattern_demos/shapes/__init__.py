"""
Shapes demo.

Drawing is dispatched through Shape.draw instead of a conditional on the
shape's type, so adding a figure never touches DrawManager.
"""

from .base import Point, Shape
from .figures import Circle, Square
from .manager import DrawManager

__all__ = ["Point", "Shape", "Circle", "Square", "DrawManager"]
