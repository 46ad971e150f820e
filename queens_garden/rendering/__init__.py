"""Presentation layer."""

from .base import NullRenderer, Renderer
from .console import ConsoleRenderer

__all__ = [
    "ConsoleRenderer",
    "NullRenderer",
    "Renderer",
]
