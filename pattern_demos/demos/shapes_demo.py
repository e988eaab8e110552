"""
Shapes demo: polymorphic drawing through DrawManager.
"""

from ..shapes import DrawManager
from .base import BaseDemo, DemoResult


class ShapesDemo(BaseDemo):
    name = "shapes"
    description = "Draw shapes through polymorphic dispatch (Open/Closed Principle)"

    def run(self) -> DemoResult:
        manager = DrawManager()
        manager.draw_shapes()
        return DemoResult(demo_name=self.name, lines_written=len(manager.shapes))
