"""
Pattern Demos - two small object-oriented design pattern examples.

The shapes demo replaces a conditional drawing dispatcher with polymorphism;
the phones demo builds product families with an abstract factory.
"""

from .config import DemoConfig
from .runner import DemoRunner

__version__ = "0.1.0"
__all__ = ["DemoRunner", "DemoConfig"]
