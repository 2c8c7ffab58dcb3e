"""Tests for game state."""

import pytest
from pydantic import ValidationError

from five_crowns.models.card import Joker, NormalCard, Rank, Suit
from five_crowns.models.game_state import GameState


class TestGameState:
    """Tests for GameState class."""

    @pytest.mark.parametrize("wild_rank", list(Rank))
    def test_joker_always_wild(self, wild_rank):
        """Test a joker is wild whatever the wild rank."""
        assert GameState(wild_rank=wild_rank).is_card_wild(Joker())

    @pytest.mark.parametrize("wild_rank", list(Rank))
    def test_normal_card_wild_only_on_wild_rank(self, wild_rank):
        """Test a normal card is wild exactly when its rank is the wild rank."""
        state = GameState(wild_rank=wild_rank)
        for suit in Suit:
            for rank in Rank:
                card = NormalCard(suit=suit, rank=rank)
                assert state.is_card_wild(card) == (rank == wild_rank)

    def test_is_rank_wild(self):
        """Test rank predicate."""
        state = GameState(wild_rank=Rank.QUEEN)
        assert state.is_rank_wild(Rank.QUEEN)
        assert not state.is_rank_wild(Rank.KING)

    def test_for_round(self):
        """Test the wild rank advances with the round."""
        assert GameState.for_round(1).wild_rank == Rank.THREE
        assert GameState.for_round(4).wild_rank == Rank.SIX
        assert GameState.for_round(11).wild_rank == Rank.KING

    @pytest.mark.parametrize("round_number", [0, -1, 12])
    def test_for_round_out_of_range(self, round_number):
        """Test invalid round numbers are rejected."""
        with pytest.raises(ValueError):
            GameState.for_round(round_number)

    def test_cards_per_hand(self):
        """Test hand size matches the wild rank's number."""
        assert GameState(wild_rank=Rank.THREE).cards_per_hand == 3
        assert GameState(wild_rank=Rank.JACK).cards_per_hand == 11
        assert GameState(wild_rank=Rank.KING).cards_per_hand == 13

    def test_state_is_frozen(self):
        """Test the round snapshot cannot be changed in place."""
        state = GameState(wild_rank=Rank.SIX)
        with pytest.raises(ValidationError):
            state.wild_rank = Rank.SEVEN

    def test_string(self):
        """Test game state string representation."""
        assert str(GameState(wild_rank=Rank.TEN)) == "Round with 10s wild"
