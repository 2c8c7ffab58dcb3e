"""Check logging module."""

from .check_logger import CheckLogger
from .formatters import describe_result, format_card, format_cards, format_result

__all__ = [
    "CheckLogger",
    "describe_result",
    "format_card",
    "format_cards",
    "format_result",
]
