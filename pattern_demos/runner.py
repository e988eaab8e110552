"""
Demo runner.

Builds the demos enabled in the configuration and runs them in order.
"""

import logging

from .config import DemoConfig
from .demos import DEMO_REGISTRY, BaseDemo, DemoResult

logger = logging.getLogger(__name__)


class DemoRunner:
    """
    Main entry class for running demos.

    Demos write their own text to standard output; the runner only
    sequences them and collects their results.
    """

    def __init__(self, config: DemoConfig | None = None):
        """
        Initialize the runner.

        Args:
            config: Configuration for the runner. Uses defaults if not provided.
        """
        self.config = config or DemoConfig.default()
        self._demos: dict[str, BaseDemo] = {}
        self._initialize_demos()

    def _initialize_demos(self) -> None:
        """Initialize enabled demos based on configuration."""
        for demo_name in self.config.get_enabled_demos():
            if demo_name in DEMO_REGISTRY:
                self._demos[demo_name] = DEMO_REGISTRY[demo_name]()

    @property
    def demo_names(self) -> list[str]:
        return list(self._demos)

    def run_demo(self, demo_name: str) -> DemoResult:
        """
        Run a single enabled demo.

        Raises:
            ValueError: If the demo is unknown or disabled
        """
        if demo_name not in self._demos:
            raise ValueError(f"Demo not enabled: {demo_name}")
        logger.debug("Running demo: %s", demo_name)
        result = self._demos[demo_name].run()
        logger.debug("Demo %s wrote %d lines", demo_name, result.lines_written)
        return result

    def run(self) -> list[DemoResult]:
        """Run every enabled demo in order."""
        return [self.run_demo(name) for name in self._demos]
