"""
Concrete shapes.
"""

from .base import Point, Shape


class Circle(Shape):
    def __init__(self, center: Point, radius: int):
        super().__init__(center)
        self._radius = radius
        self._type = "Circle"

    @property
    def radius(self) -> int:
        return self._radius

    def draw(self) -> None:
        print("Draw Circle!")


class Square(Shape):
    def __init__(self, center: Point, side: int):
        super().__init__(center)
        self._side = side
        self._type = "Square"

    @property
    def side(self) -> int:
        return self._side

    def draw(self) -> None:
        print("Draw Square!")
