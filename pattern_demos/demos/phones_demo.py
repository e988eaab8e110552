"""
Phones demo: abstract factory per manufacturer.
"""

from ..phones import FACTORY_REGISTRY, run_phone_demo
from .base import BaseDemo, DemoResult

# Manufacturer, smartphone and basic phone lines
LINES_PER_MANUFACTURER = 3


class PhonesDemo(BaseDemo):
    name = "phones"
    description = "Build phone product families with an abstract factory"

    def run(self) -> DemoResult:
        run_phone_demo()
        return DemoResult(
            demo_name=self.name,
            lines_written=LINES_PER_MANUFACTURER * len(FACTORY_REGISTRY),
        )
