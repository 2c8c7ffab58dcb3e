"""Meld validation."""

from .melds import Meld, MeldError, MeldKind, MeldResult, Run, Set
from .validator import MeldShape, MeldValidator, ValidationResult

__all__ = [
    "Meld",
    "MeldError",
    "MeldKind",
    "MeldResult",
    "MeldShape",
    "MeldValidator",
    "Run",
    "Set",
    "ValidationResult",
]
