"""Game state models."""

from pydantic import BaseModel

from .card import Card, Joker, Rank

NUM_ROUNDS = len(Rank)


class GameState(BaseModel, frozen=True):
    """Per-round context. Replaced wholesale at each round boundary."""

    wild_rank: Rank

    @classmethod
    def for_round(cls, round_number: int) -> "GameState":
        """Create the state for a round.

        Round 1 has Threes wild, round 2 Fours, ... round 11 Kings.

        Args:
            round_number: 1-based round number.

        Returns:
            GameState for that round.
        """
        if round_number < 1 or round_number > NUM_ROUNDS:
            raise ValueError(
                f"Round must be between 1 and {NUM_ROUNDS}, got {round_number}"
            )
        return cls(wild_rank=list(Rank)[round_number - 1])

    @property
    def cards_per_hand(self) -> int:
        """Number of cards dealt to each player this round."""
        return self.wild_rank.number

    def is_card_wild(self, card: Card) -> bool:
        """Check if a card is wild this round (Jokers always are)."""
        if isinstance(card, Joker):
            return True
        return self.is_rank_wild(card.rank)

    def is_rank_wild(self, rank: Rank) -> bool:
        """Check if cards of this rank are wild this round."""
        return self.wild_rank == rank

    def __str__(self) -> str:
        return f"Round with {str(self.wild_rank)}s wild"
