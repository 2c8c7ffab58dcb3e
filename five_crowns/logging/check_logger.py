"""Check logger for recording meld checks."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from five_crowns.config import CheckLogConfig
from five_crowns.game.melds import MeldResult
from five_crowns.models.game_state import GameState
from five_crowns.models.hand import Hand

from .formatters import format_cards, format_result


class CheckLogger:
    """Logger for meld checks in JSONL format.

    Each line in the output file is a JSON object representing one event.
    """

    def __init__(self, config: CheckLogConfig | None = None):
        """Initialize check logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or CheckLogConfig()
        self._file: TextIO | None = None
        self.checks = 0
        self.valid_checks = 0

    def __enter__(self) -> "CheckLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, game_state: GameState) -> None:
        """Log session start with the round being checked against.

        Args:
            game_state: Round state used for every check in the session.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "wild_rank": str(game_state.wild_rank),
        })

    def log_check(
        self,
        hand: Hand,
        game_state: GameState,
        run_result: MeldResult,
        set_result: MeldResult,
    ) -> None:
        """Log one hand checked as both a run and a set.

        Args:
            hand: Cards checked.
            game_state: Round state used.
            run_result: Outcome of the run check.
            set_result: Outcome of the set check.
        """
        self.checks += 1
        if run_result.is_valid or set_result.is_valid:
            self.valid_checks += 1

        self._write({
            "type": "check",
            "check": self.checks,
            "cards": format_cards(hand),
            "wild_rank": str(game_state.wild_rank),
            "run": format_result(run_result),
            "set": format_result(set_result),
        })

    def log_session_end(self) -> None:
        """Log session end with totals."""
        self._write({
            "type": "session_end",
            "total_checks": self.checks,
            "valid_checks": self.valid_checks,
        })
