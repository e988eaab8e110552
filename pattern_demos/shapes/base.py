"""
Base classes for drawable shapes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A plain coordinate pair."""

    x: int = 0
    y: int = 0


class Shape(ABC):
    """
    Abstract base class for all drawable shapes.

    To create a new shape:
    1. Inherit from Shape
    2. Set the type label in the constructor
    3. Implement the draw method
    """

    def __init__(self, center: Point):
        self._center = center
        self._type = "BaseFigure"

    @property
    def center(self) -> Point:
        return self._center

    def get_type(self) -> str:
        """Get the type label set by the concrete shape."""
        return self._type

    @abstractmethod
    def draw(self) -> None:
        """Write this shape's line to standard output."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self._center!r})"
