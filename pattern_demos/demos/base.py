"""
Base classes for demos.

All demos must inherit from BaseDemo and implement the run method.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class DemoResult:
    """
    Result of running a demo.

    Attributes:
        demo_name: Name of the demo that ran
        lines_written: Number of lines the demo printed
    """

    demo_name: str
    lines_written: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "demo_name": self.demo_name,
            "lines_written": self.lines_written,
        }


class BaseDemo(ABC):
    """
    Abstract base class for all demos.

    To create a new demo:
    1. Inherit from BaseDemo
    2. Set the class attributes (name, description)
    3. Implement the run method
    4. Add it to DEMO_REGISTRY
    """

    name: str = "base_demo"
    description: str = "Base demo description"

    @abstractmethod
    def run(self) -> DemoResult:
        """
        Run the demo, printing its output to standard output.

        Returns:
            DemoResult describing what was printed
        """
        pass
