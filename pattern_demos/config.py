"""
Configuration module for pattern demos.

Provides options for selecting which demos to run.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .demos import DEMO_REGISTRY


@dataclass
class DemoSettings:
    """Configuration for a specific demo."""

    enabled: bool = True


@dataclass
class DemoConfig:
    """
    Configuration for the demo runner.

    Attributes:
        demos: Dictionary mapping demo names to their settings
    """

    demos: dict[str, DemoSettings] = field(default_factory=dict)

    # Demo name -> description, in run order
    AVAILABLE_DEMOS = {name: demo.description for name, demo in DEMO_REGISTRY.items()}

    def __post_init__(self) -> None:
        for demo_name in self.demos:
            self._check_demo(demo_name)
        for demo_name in self.AVAILABLE_DEMOS:
            if demo_name not in self.demos:
                self.demos[demo_name] = DemoSettings()

    def _check_demo(self, demo_name: str) -> None:
        if demo_name not in self.AVAILABLE_DEMOS:
            raise ValueError(f"Unknown demo: {demo_name}")

    def enable_demo(self, demo_name: str) -> None:
        """Enable a specific demo."""
        self._check_demo(demo_name)
        self.demos[demo_name] = DemoSettings(enabled=True)

    def disable_demo(self, demo_name: str) -> None:
        """Disable a specific demo."""
        self._check_demo(demo_name)
        self.demos[demo_name].enabled = False

    def enable_only(self, *demo_names: str) -> None:
        """Enable only the specified demos, disable all others."""
        for demo_name in demo_names:
            self._check_demo(demo_name)
        for demo_name in self.AVAILABLE_DEMOS:
            self.demos[demo_name] = DemoSettings(enabled=demo_name in demo_names)

    def get_enabled_demos(self) -> list[str]:
        """Get enabled demo names in run order."""
        return [name for name in self.AVAILABLE_DEMOS if self.is_demo_enabled(name)]

    def is_demo_enabled(self, demo_name: str) -> bool:
        """Check if a demo is enabled."""
        return demo_name in self.demos and self.demos[demo_name].enabled

    @classmethod
    def from_file(cls, config_path: str | Path) -> "DemoConfig":
        """
        Load configuration from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON, is not shaped like a
                configuration, or names an unknown demo
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config must be a JSON object: {path}")

        demos_data = data.get("demos", {})
        if not isinstance(demos_data, dict):
            raise ValueError(f"'demos' must be a JSON object: {path}")

        demos = {}
        for demo_name, demo_data in demos_data.items():
            if isinstance(demo_data, bool):
                demos[demo_name] = DemoSettings(enabled=demo_data)
            elif isinstance(demo_data, dict):
                demos[demo_name] = DemoSettings(enabled=bool(demo_data.get("enabled", True)))
            else:
                raise ValueError(f"Invalid settings for demo {demo_name!r}: {demo_data!r}")

        return cls(demos=demos)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "demos": {name: {"enabled": settings.enabled} for name, settings in self.demos.items()},
        }

    def save(self, config_path: str | Path) -> None:
        """Save configuration to a JSON file."""
        path = Path(config_path)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def default(cls) -> "DemoConfig":
        """Create a default configuration with all demos enabled."""
        return cls()
