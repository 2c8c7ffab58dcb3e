"""Logging utilities and check result display."""

import logging
import sys
from typing import TYPE_CHECKING, Iterable

from five_crowns.logging.formatters import describe_result

if TYPE_CHECKING:
    from five_crowns.game.melds import MeldResult
    from five_crowns.models.card import Card
    from five_crowns.models.game_state import GameState
    from five_crowns.models.hand import Hand


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class MeldDisplay:
    """Display check results to stdout."""

    def __init__(self, show_scores: bool = False):
        """Initialize display.

        Args:
            show_scores: Whether to show card and meld scores
        """
        self.show_scores = show_scores

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_deck(self, cards: Iterable["Card"]) -> None:
        """Print every card of a deck with its score."""
        self.print_separator()
        print("DECK")
        self.print_separator()
        for card in cards:
            print(f"{card}: {card.score}")

    def print_round(self, game_state: "GameState") -> None:
        """Print the round being checked against."""
        print(f"{game_state} ({game_state.cards_per_hand} cards per hand)")

    def print_hand_result(
        self,
        hand: "Hand",
        run_result: "MeldResult",
        set_result: "MeldResult",
    ) -> None:
        """Print the set and run outcome for one hand."""
        header = f"{hand}:"
        if self.show_scores:
            header += f" ({hand.score} points)"
        print(header)
        print(f"  Set: {describe_result(set_result)}")
        print(f"  Run: {describe_result(run_result)}")

    def print_invalid_hand(self, text: str) -> None:
        """Print a hand string that could not be parsed."""
        print(f"{text!r}: invalid hand", file=sys.stderr)

    def print_summary(self, total: int, valid: int) -> None:
        """Print totals after all hands were checked."""
        self.print_separator()
        print(f"Checked {total} hands, {valid} form a meld")
