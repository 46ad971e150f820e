"""Game logic."""

from .engine import ActionResult, GameEngine
from .rules import RulesEngine, ValidationResult

__all__ = [
    "ActionResult",
    "GameEngine",
    "RulesEngine",
    "ValidationResult",
]
