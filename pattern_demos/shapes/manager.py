"""
Draw manager holding a fixed collection of shapes.
"""

import logging

from .base import Point, Shape
from .figures import Circle, Square

logger = logging.getLogger(__name__)


class DrawManager:
    """
    Owns a list of shapes and draws them in insertion order.

    The manager is populated once at construction with a square and a
    circle centered at the origin.
    """

    DEFAULT_SIZE = 3

    def __init__(self):
        origin = Point(0, 0)
        self._shapes: list[Shape] = [
            Square(origin, self.DEFAULT_SIZE),
            Circle(origin, self.DEFAULT_SIZE),
        ]

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """Snapshot of the held shapes."""
        return tuple(self._shapes)

    def draw_shapes(self) -> None:
        """Draw every shape in insertion order."""
        for shape in self._shapes:
            logger.debug("Drawing %s", shape.get_type())
            shape.draw()
