"""Run and Set validation for proposed melds."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Sequence

from five_crowns.models.card import Card, NormalCard, Rank, Suit
from five_crowns.models.game_state import GameState

MIN_CARDS = 3
MAX_RUN_CARDS = len(Rank)


class MeldError(IntEnum):
    """Reasons a proposed meld is rejected."""

    NONE = 0
    TOO_FEW_CARDS = 1
    TOO_MANY_CARDS = 2
    NOT_ALL_SAME_SUIT = 3
    NOT_ALL_SAME_RANK = 4
    NOT_ALL_IN_ORDER = 5
    OUT_OF_RANGE = 6


class MeldKind(str, Enum):
    """Classification of a valid meld."""

    NORMAL = "normal"  # Anchored on at least one non-wild card
    ALL_WILDS = "all_wilds"  # Every card is a Joker or of the wild rank


def _find_anchor(
    cards: Sequence[Card], game_state: GameState
) -> tuple[int, NormalCard | None]:
    """Get the first non-wild card and its position."""
    for index, card in enumerate(cards):
        normal = card.non_wild(game_state)
        if normal is not None:
            return index, normal
    return -1, None


@dataclass(frozen=True)
class Run:
    """Consecutive cards of one suit, read in the order given.

    For NORMAL runs ``suit``, ``low_rank`` and ``high_rank`` describe the
    window the cards occupy. ALL_WILDS runs leave them unset.
    """

    cards: tuple[Card, ...]
    kind: MeldKind
    suit: Suit | None = None
    low_rank: Rank | None = None
    high_rank: Rank | None = None

    @classmethod
    def try_from(cls, cards: Sequence[Card], game_state: GameState) -> "MeldResult":
        """Validate ``cards`` as a run.

        The first non-wild card (the anchor) fixes the suit and, through its
        position, the rank window: position 0 holds ``low_rank`` and each
        following position one rank higher. Wild cards fill whatever slot
        they sit in. Wildness is decided by the game state alone, so a card
        of the wild rank never anchors or constrains the window, even when
        its face value would fit.

        Args:
            cards: Proposed cards, in order.
            game_state: Current round.

        Returns:
            MeldResult holding the Run or the reason it was rejected.
        """
        cards = tuple(cards)

        if len(cards) < MIN_CARDS:
            return MeldResult(error=MeldError.TOO_FEW_CARDS)
        if len(cards) > MAX_RUN_CARDS:
            return MeldResult(error=MeldError.TOO_MANY_CARDS)

        anchor_index, anchor = _find_anchor(cards, game_state)
        if anchor is None:
            return MeldResult(meld=cls(cards=cards, kind=MeldKind.ALL_WILDS))

        for card in cards:
            normal = card.non_wild(game_state)
            if normal is not None and normal.suit != anchor.suit:
                return MeldResult(error=MeldError.NOT_ALL_SAME_SUIT)

        low_rank = anchor.rank.minus(anchor_index)
        if low_rank is None:
            return MeldResult(error=MeldError.OUT_OF_RANGE)
        high_rank = low_rank.plus(len(cards) - 1)
        if high_rank is None:
            return MeldResult(error=MeldError.OUT_OF_RANGE)

        for offset, card in enumerate(cards):
            normal = card.non_wild(game_state)
            if normal is not None and normal.rank != low_rank.plus(offset):
                return MeldResult(error=MeldError.NOT_ALL_IN_ORDER)

        return MeldResult(
            meld=cls(
                cards=cards,
                kind=MeldKind.NORMAL,
                suit=anchor.suit,
                low_rank=low_rank,
                high_rank=high_rank,
            )
        )

    @property
    def is_all_wilds(self) -> bool:
        return self.kind == MeldKind.ALL_WILDS

    @property
    def length(self) -> int:
        return len(self.cards)

    @property
    def score(self) -> int:
        return sum(c.score for c in self.cards)

    def __str__(self) -> str:
        return ",".join(str(c) for c in self.cards)


@dataclass(frozen=True)
class Set:
    """Cards sharing one rank. Suits may repeat."""

    cards: tuple[Card, ...]
    kind: MeldKind
    rank: Rank | None = None
    suits: tuple[Suit, ...] = ()

    @classmethod
    def try_from(cls, cards: Sequence[Card], game_state: GameState) -> "MeldResult":
        """Validate ``cards`` as a set.

        Args:
            cards: Proposed cards, in order.
            game_state: Current round.

        Returns:
            MeldResult holding the Set or the reason it was rejected.
        """
        cards = tuple(cards)

        if len(cards) < MIN_CARDS:
            return MeldResult(error=MeldError.TOO_FEW_CARDS)

        _, anchor = _find_anchor(cards, game_state)
        if anchor is None:
            return MeldResult(meld=cls(cards=cards, kind=MeldKind.ALL_WILDS))

        suits = []
        for card in cards:
            normal = card.non_wild(game_state)
            if normal is None:
                continue
            if normal.rank != anchor.rank:
                return MeldResult(error=MeldError.NOT_ALL_SAME_RANK)
            suits.append(normal.suit)

        return MeldResult(
            meld=cls(
                cards=cards,
                kind=MeldKind.NORMAL,
                rank=anchor.rank,
                suits=tuple(suits),
            )
        )

    @property
    def is_all_wilds(self) -> bool:
        return self.kind == MeldKind.ALL_WILDS

    @property
    def length(self) -> int:
        return len(self.cards)

    @property
    def score(self) -> int:
        return sum(c.score for c in self.cards)

    def __str__(self) -> str:
        return ",".join(str(c) for c in self.cards)


Meld = Run | Set


@dataclass(frozen=True)
class MeldResult:
    """Outcome of validating a proposed meld."""

    meld: Meld | None = None
    error: MeldError = MeldError.NONE

    @property
    def is_valid(self) -> bool:
        """Check if validation found no errors."""
        return self.error == MeldError.NONE
