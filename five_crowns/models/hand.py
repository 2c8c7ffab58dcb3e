"""Hand model."""

from collections import Counter
from typing import Iterable, Iterator

from .card import Card, parse_card


class Hand:
    """Ordered sequence of cards with the comma separated text form.

    Order is preserved because meld validation reads cards positionally.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards, in order.
        """
        self._cards: tuple[Card, ...] = tuple(cards) if cards else ()

    @classmethod
    def try_from(cls, text: str) -> "Hand | None":
        """Parse a hand such as "3S, 10H,Joker".

        Whitespace around each token is ignored. A blank string is the empty
        hand. A trailing comma or any invalid token makes the whole hand
        invalid.

        Args:
            text: Comma separated card tokens.

        Returns:
            Parsed Hand, or None if any token fails to parse.
        """
        text = text.strip()
        if not text:
            return cls()

        cards = []
        for token in text.split(","):
            card = parse_card(token.strip())
            if card is None:
                return None
            cards.append(card)
        return cls(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def score(self) -> int:
        """Sum of the card scores."""
        return sum(c.score for c in self._cards)

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def has_joker(self) -> bool:
        """Check if joker is in the hand."""
        return any(c.is_joker for c in self._cards)

    def contains(self, cards: Iterable[Card]) -> bool:
        """Check if the hand holds all of ``cards``, counting duplicates."""
        needed = Counter(cards)
        held = Counter(self._cards)
        return all(held[card] >= n for card, n in needed.items())

    def sorted(self) -> "Hand":
        """Get a copy sorted by suit, then rank, Jokers last."""
        return Hand(sorted(self._cards, key=lambda c: c.sort_key()))

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        return ",".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand({str(self)!r})"
