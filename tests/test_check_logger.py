"""Tests for the check logger and formatters."""

import json

from five_crowns.config import CheckLogConfig
from five_crowns.game.melds import Run, Set
from five_crowns.logging import (
    CheckLogger,
    describe_result,
    format_card,
    format_cards,
    format_result,
)
from five_crowns.models.card import Joker, Rank
from five_crowns.models.game_state import GameState
from five_crowns.models.hand import Hand

SIXES_WILD = GameState(wild_rank=Rank.SIX)


def check(text):
    hand = Hand.try_from(text)
    return (
        hand,
        Run.try_from(hand.cards, SIXES_WILD),
        Set.try_from(hand.cards, SIXES_WILD),
    )


class TestFormatters:
    """Tests for formatter helpers."""

    def test_format_cards(self):
        """Test card formatting keeps order."""
        hand = Hand.try_from("9R,10R,Joker")
        assert format_card(Joker()) == "Joker"
        assert format_cards(hand) == "9R,10R,Joker"
        assert format_cards([]) == ""

    def test_format_normal_run(self):
        """Test a normal run is formatted with its window."""
        _, run_result, _ = check("9R,10R,6H")

        assert format_result(run_result) == {
            "valid": True,
            "kind": "normal",
            "suit": "STAR",
            "low": "9",
            "high": "J",
        }

    def test_format_set(self):
        """Test a normal set is formatted with its rank."""
        _, _, set_result = check("5S,5D,5D")

        assert format_result(set_result) == {"valid": True, "kind": "normal", "rank": "5"}

    def test_format_all_wilds(self):
        """Test all-wild melds carry no classification fields."""
        _, run_result, _ = check("Joker,Joker,6D")

        assert format_result(run_result) == {"valid": True, "kind": "all_wilds"}

    def test_format_error(self):
        """Test an invalid result is formatted with its error."""
        _, run_result, _ = check("QD,KD,Joker")

        assert format_result(run_result) == {"valid": False, "error": "OUT_OF_RANGE"}

    def test_describe_result(self):
        """Test one-line descriptions."""
        _, run_result, set_result = check("9R,10R,6H")
        assert describe_result(run_result) == "Star 9-J"
        assert describe_result(set_result) == "invalid (NOT_ALL_SAME_RANK)"

        _, _, set_result = check("KS,KH,Joker")
        assert describe_result(set_result) == "Ks"

        _, run_result, _ = check("Joker,Joker,Joker")
        assert describe_result(run_result) == "all wilds"


class TestCheckLogger:
    """Tests for CheckLogger class."""

    def test_disabled_writes_nothing(self, tmp_path):
        """Test no file is created when logging is disabled."""
        path = tmp_path / "checks.jsonl"
        with CheckLogger(CheckLogConfig(enabled=False, output_path=str(path))) as log:
            log.log_session_start(SIXES_WILD)
            hand, run_result, set_result = check("3S,4S,5S")
            log.log_check(hand, SIXES_WILD, run_result, set_result)
            log.log_session_end()

        assert not path.exists()
        assert log.checks == 1

    def test_writes_events(self, tmp_path):
        """Test session and check events are written as JSON lines."""
        path = tmp_path / "logs" / "checks.jsonl"
        config = CheckLogConfig(enabled=True, output_path=str(path))

        with CheckLogger(config) as log:
            log.log_session_start(SIXES_WILD)
            hand, run_result, set_result = check("9R,10R,6H")
            log.log_check(hand, SIXES_WILD, run_result, set_result)
            hand, run_result, set_result = check("3H,4D,5C")
            log.log_check(hand, SIXES_WILD, run_result, set_result)
            log.log_session_end()

        events = [json.loads(line) for line in path.read_text().splitlines()]

        assert [e["type"] for e in events] == [
            "session_start",
            "check",
            "check",
            "session_end",
        ]
        assert events[0]["wild_rank"] == "6"
        assert events[1]["cards"] == "9R,10R,6H"
        assert events[1]["run"]["valid"]
        assert events[2]["set"] == {"valid": False, "error": "NOT_ALL_SAME_RANK"}
        assert events[3] == {"type": "session_end", "total_checks": 2, "valid_checks": 1}

    def test_appends(self, tmp_path):
        """Test a second session appends to the same file."""
        path = tmp_path / "checks.jsonl"
        config = CheckLogConfig(enabled=True, output_path=str(path))

        for _ in range(2):
            with CheckLogger(config) as log:
                log.log_session_start(SIXES_WILD)

        assert len(path.read_text().splitlines()) == 2
