"""Game models."""

from .card import (
    Card,
    Joker,
    NormalCard,
    Rank,
    Suit,
    create_full_deck,
    parse_card,
)
from .game_state import GameState
from .hand import Hand

__all__ = [
    "Card",
    "Joker",
    "NormalCard",
    "Rank",
    "Suit",
    "create_full_deck",
    "parse_card",
    "GameState",
    "Hand",
]
