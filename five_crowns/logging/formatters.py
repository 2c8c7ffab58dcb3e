"""Formatters for check log and console output."""

from typing import Any, Iterable

from five_crowns.game.melds import MeldKind, MeldResult, Run
from five_crowns.models.card import Card


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Card token (e.g., "10D" for Diamond 10, "Joker" for a Joker).
    """
    return str(card)


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, in order.

    Returns:
        Comma-separated card tokens (e.g., "9R,10R,6H").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_result(result: MeldResult) -> dict[str, Any]:
    """Format a meld check outcome to a JSON-friendly dict.

    Args:
        result: Outcome of Run.try_from or Set.try_from.

    Returns:
        Dict with "valid" plus either "error" or the meld classification.
    """
    if not result.is_valid or result.meld is None:
        return {"valid": False, "error": result.error.name}

    meld = result.meld
    record: dict[str, Any] = {"valid": True, "kind": meld.kind.value}
    if meld.kind == MeldKind.ALL_WILDS:
        return record

    if isinstance(meld, Run):
        record["suit"] = meld.suit.name
        record["low"] = str(meld.low_rank)
        record["high"] = str(meld.high_rank)
    else:
        record["rank"] = str(meld.rank)
    return record


def describe_result(result: MeldResult) -> str:
    """Describe a meld check outcome in one line.

    Args:
        result: Outcome of Run.try_from or Set.try_from.

    Returns:
        Text such as "Star 9-J", "5s", "all wilds" or "invalid (OUT_OF_RANGE)".
    """
    if not result.is_valid or result.meld is None:
        return f"invalid ({result.error.name})"

    meld = result.meld
    if meld.kind == MeldKind.ALL_WILDS:
        return "all wilds"
    if isinstance(meld, Run):
        return f"{meld.suit.name.title()} {str(meld.low_rank)}-{str(meld.high_rank)}"
    return f"{str(meld.rank)}s"
