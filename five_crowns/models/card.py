"""Suit, Rank and Card models."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from .game_state import GameState

JOKER_SCORE = 25
JOKER_STRING = "Joker"
NUM_JOKERS_IN_DECK = 4


class Suit(IntEnum):
    """Card suit. Declared order is only used for display and sorting."""

    SPADE = 0
    CLUB = 1
    HEART = 2
    DIAMOND = 3
    STAR = 4

    @classmethod
    def try_from(cls, token: str) -> Suit | None:
        """Parse a single-character suit token ("S", "C", "H", "D", "R")."""
        return SUIT_FROM_CODE.get(token)

    def __str__(self) -> str:
        return SUIT_CODES[self]


class Rank(IntEnum):
    """Card rank. Value is the face value (3-13), which is also the score.

    Order: 3 < 4 < ... < 10 < J < Q < K
    """

    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def score(self) -> int:
        """Points counted against a player holding this rank."""
        return int(self)

    @property
    def number(self) -> int:
        """Face number; also the hand size of the round where this rank is wild."""
        return int(self)

    def steps_to(self, other: Rank) -> int:
        """Signed number of steps from this rank to ``other``."""
        return other - self

    def plus(self, offset: int) -> Rank | None:
        """Get the rank ``offset`` steps higher, or None past King."""
        if offset < 0:
            raise ValueError(f"Offset must be non-negative, got {offset}")
        value = self + offset
        if value > Rank.KING:
            return None
        return Rank(value)

    def minus(self, offset: int) -> Rank | None:
        """Get the rank ``offset`` steps lower, or None before Three."""
        if offset < 0:
            raise ValueError(f"Offset must be non-negative, got {offset}")
        value = self - offset
        if value < Rank.THREE:
            return None
        return Rank(value)

    def next(self) -> Rank | None:
        """The rank one above this one, or None after King."""
        return self.plus(1)

    @classmethod
    def try_from(cls, token: str) -> Rank | None:
        """Parse a rank token ("3".."10", "J", "Q", "K")."""
        return RANK_FROM_NAME.get(token)

    def __str__(self) -> str:
        return RANK_NAMES[self]


# Map rank to display string
RANK_NAMES = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_CODES = {
    Suit.SPADE: "S",
    Suit.CLUB: "C",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.STAR: "R",
}

RANK_FROM_NAME = {name: rank for rank, name in RANK_NAMES.items()}
SUIT_FROM_CODE = {code: suit for suit, code in SUIT_CODES.items()}


class NormalCard(BaseModel, frozen=True):
    """A suited card. Wildness depends on the round, see ``GameState``."""

    suit: Suit
    rank: Rank

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return False

    @property
    def score(self) -> int:
        """Points counted against a player holding this card."""
        return self.rank.score

    def is_wild(self, game_state: GameState) -> bool:
        """Check if this card is wild in the given round."""
        return game_state.is_card_wild(self)

    def non_wild(self, game_state: GameState) -> NormalCard | None:
        """Get this card if it is not wild in the given round."""
        if self.is_wild(game_state):
            return None
        return self

    def sort_key(self) -> tuple[int, int]:
        return (self.suit, self.rank)

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_CODES[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


class Joker(BaseModel, frozen=True):
    """A Joker. Has no suit or rank and is wild in every round."""

    @property
    def suit(self) -> None:
        return None

    @property
    def rank(self) -> None:
        return None

    @property
    def is_joker(self) -> bool:
        return True

    @property
    def score(self) -> int:
        return JOKER_SCORE

    def is_wild(self, game_state: GameState) -> bool:
        return True

    def non_wild(self, game_state: GameState) -> None:
        return None

    def sort_key(self) -> tuple[int, int]:
        # Jokers sort after every suited card
        return (len(Suit), 0)

    def __str__(self) -> str:
        return JOKER_STRING

    def __repr__(self) -> str:
        return str(self)


Card = NormalCard | Joker


def parse_card(token: str) -> Card | None:
    """Parse a card token.

    Args:
        token: ``<rank><suit>`` such as "10D" or "JR", or the literal "Joker".

    Returns:
        The parsed card, or None if the token is not a valid card.
    """
    if token == JOKER_STRING:
        return Joker()
    if len(token) < 2:
        return None

    rank = Rank.try_from(token[:-1])
    suit = Suit.try_from(token[-1])
    if rank is None or suit is None:
        return None
    return NormalCard(suit=suit, rank=rank)


def create_full_deck() -> list[Card]:
    """Create a full deck: every suit/rank pair followed by the Jokers."""
    cards: list[Card] = []

    # Add all suit cards
    for suit in Suit:
        for rank in Rank:
            cards.append(NormalCard(suit=suit, rank=rank))

    # Add jokers
    cards.extend(Joker() for _ in range(NUM_JOKERS_IN_DECK))

    return cards
