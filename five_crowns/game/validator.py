"""Validation of proposed melds and going-out plays."""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from five_crowns.models.card import Card
from five_crowns.models.game_state import GameState
from five_crowns.models.hand import Hand

from .melds import Meld, MeldResult, Run, Set

logger = logging.getLogger(__name__)


class MeldShape(str, Enum):
    """Target shape a proposal is judged against."""

    RUN = "run"
    SET = "set"


@dataclass
class ValidationResult:
    """Result of validation."""

    is_valid: bool
    error_message: str = ""
    meld: Meld | None = None


class MeldValidator:
    """Validates proposed melds on behalf of game code."""

    def validate(
        self,
        cards: Sequence[Card],
        game_state: GameState,
        shape: MeldShape,
    ) -> ValidationResult:
        """Validate cards as one target shape.

        Args:
            cards: Proposed cards, in order
            game_state: Current round
            shape: Run or Set

        Returns:
            ValidationResult
        """
        result = self._try_shape(cards, game_state, shape)
        logger.debug(
            f"{shape.value} check [{_join(cards)}] "
            f"wild={str(game_state.wild_rank)}: {result.error.name}"
        )

        if not result.is_valid:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a valid {shape.value}: {result.error.name}",
            )
        return ValidationResult(is_valid=True, meld=result.meld)

    def validate_any(
        self,
        cards: Sequence[Card],
        game_state: GameState,
    ) -> ValidationResult:
        """Validate cards as a run, falling back to a set.

        Args:
            cards: Proposed cards, in order
            game_state: Current round

        Returns:
            ValidationResult carrying whichever meld matched first
        """
        run_result = self._try_shape(cards, game_state, MeldShape.RUN)
        if run_result.is_valid:
            return ValidationResult(is_valid=True, meld=run_result.meld)

        set_result = self._try_shape(cards, game_state, MeldShape.SET)
        if set_result.is_valid:
            return ValidationResult(is_valid=True, meld=set_result.meld)

        logger.debug(
            f"[{_join(cards)}] is neither run ({run_result.error.name}) "
            f"nor set ({set_result.error.name})"
        )
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Not a run ({run_result.error.name}) "
                f"or a set ({set_result.error.name})"
            ),
        )

    def validate_hand_contains(
        self,
        hand: Hand,
        cards: Iterable[Card],
    ) -> ValidationResult:
        """Check that every proposed card is held, counting duplicates.

        Args:
            hand: Player's hand
            cards: Cards being proposed

        Returns:
            ValidationResult
        """
        if not hand.contains(cards):
            return ValidationResult(
                is_valid=False,
                error_message="Player does not have the proposed cards",
            )
        return ValidationResult(is_valid=True)

    def validate_go_out(
        self,
        hand: Hand,
        groups: Sequence[tuple[MeldShape, Sequence[Card]]],
        discard: Card,
        game_state: GameState,
    ) -> ValidationResult:
        """Validate laying down a whole hand.

        The discard plus every card of every group must account for the hand
        exactly, and each group must be a valid meld of its declared shape.

        Args:
            hand: Player's hand, including the card just drawn
            groups: Declared shape and cards of each meld
            discard: Card going to the discard pile
            game_state: Current round

        Returns:
            ValidationResult (``meld`` is left unset)
        """
        if not hand.contains([discard]):
            return ValidationResult(
                is_valid=False,
                error_message=f"Discard {discard} is not in hand",
            )

        used: Counter[Card] = Counter([discard])
        for index, (shape, cards) in enumerate(groups):
            result = self.validate(cards, game_state, shape)
            if not result.is_valid:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Group {index + 1}: {result.error_message}",
                )
            used.update(cards)

        if used != Counter(hand):
            return ValidationResult(
                is_valid=False,
                error_message="Melds and discard do not use exactly the cards in hand",
            )

        logger.debug(f"Go out accepted with {len(groups)} melds, discard {discard}")
        return ValidationResult(is_valid=True)

    def remaining_score(self, cards: Iterable[Card]) -> int:
        """Points for cards left in hand at the end of a round."""
        return sum(c.score for c in cards)

    def _try_shape(
        self,
        cards: Sequence[Card],
        game_state: GameState,
        shape: MeldShape,
    ) -> MeldResult:
        if shape == MeldShape.RUN:
            return Run.try_from(cards, game_state)
        return Set.try_from(cards, game_state)


def _join(cards: Iterable[Card]) -> str:
    return ",".join(str(c) for c in cards)
