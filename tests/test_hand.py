"""Tests for hand parsing."""

import pytest

from five_crowns.models.card import Joker, NormalCard, Rank, Suit, parse_card
from five_crowns.models.hand import Hand


def cards(*tokens):
    return [parse_card(t) for t in tokens]


class TestHandParsing:
    """Tests for Hand.try_from."""

    def test_two_cards(self):
        """Test parsing a simple hand."""
        assert Hand.try_from("3S,5C") == Hand(cards("3S", "5C"))

    def test_whitespace_around_tokens(self):
        """Test leading and trailing spaces are ok."""
        expected = Hand(cards("10H", "QD"))
        assert Hand.try_from("10H, QD") == expected
        assert Hand.try_from("   10H   ,    QD   ") == expected

    def test_single_card(self):
        """Test a single card is ok."""
        assert Hand.try_from("KR") == Hand(cards("KR"))

    def test_empty(self):
        """Test empty and blank strings are the empty hand."""
        assert Hand.try_from("") == Hand()
        assert Hand.try_from("   ") == Hand()
        assert Hand.try_from("").is_empty()

    def test_joker(self):
        """Test jokers parse inside a hand."""
        hand = Hand.try_from("Joker, 4H")
        assert hand.cards == (Joker(), NormalCard(suit=Suit.HEART, rank=Rank.FOUR))

    @pytest.mark.parametrize("text", ["3S,", ",3S", "3S,,4S", "11C", "7A", "3S,S3"])
    def test_invalid(self, text):
        """Test trailing commas and bad tokens reject the whole hand."""
        assert Hand.try_from(text) is None

    def test_order_preserved(self):
        """Test cards keep the order they were given in."""
        hand = Hand.try_from("9R,10R,6H")
        assert str(hand) == "9R,10R,6H"


class TestHand:
    """Tests for Hand helpers."""

    def test_score(self):
        """Test hand score sums card scores."""
        assert Hand.try_from("3S,KD,Joker").score == 3 + 13 + 25
        assert Hand().score == 0

    def test_contains_counts_duplicates(self):
        """Test containment respects how many copies are held."""
        hand = Hand.try_from("5D,5D,Joker")
        assert hand.contains(cards("5D", "5D"))
        assert hand.contains(cards("Joker"))
        assert not hand.contains(cards("5D", "5D", "5D"))
        assert not hand.contains(cards("5S"))

    def test_has_joker(self):
        """Test joker detection."""
        assert Hand.try_from("Joker,3S").has_joker()
        assert not Hand.try_from("3S").has_joker()

    def test_sorted(self):
        """Test sorting by suit then rank, jokers last."""
        hand = Hand.try_from("Joker,KR,4S,3C")
        assert str(hand.sorted()) == "4S,3C,KR,Joker"

    def test_len_and_iter(self):
        """Test sequence protocol."""
        hand = Hand.try_from("3S,4S,5S")
        assert len(hand) == 3
        assert hand.count() == 3
        assert [str(c) for c in hand] == ["3S", "4S", "5S"]
