"""
Demos module.

Each demo wraps one design-pattern example behind a common interface.
"""

from .base import BaseDemo, DemoResult
from .phones_demo import PhonesDemo
from .shapes_demo import ShapesDemo

__all__ = [
    "BaseDemo",
    "DemoResult",
    "ShapesDemo",
    "PhonesDemo",
]

# Registry of all available demos, in run order
DEMO_REGISTRY: dict[str, type["BaseDemo"]] = {
    "shapes": ShapesDemo,
    "phones": PhonesDemo,
}


def get_demo(demo_name: str) -> type["BaseDemo"]:
    """Get a demo class by name."""
    if demo_name not in DEMO_REGISTRY:
        raise ValueError(f"Unknown demo: {demo_name}")
    return DEMO_REGISTRY[demo_name]


def get_all_demos() -> dict[str, type["BaseDemo"]]:
    """Get all registered demos."""
    return DEMO_REGISTRY.copy()
