"""Main entry point for the five-crowns meld checker."""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from five_crowns.config import CheckLogConfig, load_config, parse_rank
from five_crowns.game.melds import Run, Set
from five_crowns.logging import CheckLogger
from five_crowns.models.card import Rank, create_full_deck
from five_crowns.models.game_state import GameState
from five_crowns.models.hand import Hand
from five_crowns.utils.logger import MeldDisplay, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Check whether hands form Five Crowns runs or sets"
    )
    parser.add_argument(
        "hands",
        nargs="*",
        help='Hands to check, e.g. "9R,10R,6H"',
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    round_group = parser.add_mutually_exclusive_group()
    round_group.add_argument(
        "-w",
        "--wild",
        help="Wild rank token or name, e.g. 6, J or six (overrides config)",
    )
    round_group.add_argument(
        "-r",
        "--round",
        type=int,
        help="Round number 1-11; round N has the rank N+2 wild",
    )
    parser.add_argument(
        "--deck",
        action="store_true",
        help="List the full deck with card scores",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Show hand scores in output",
    )
    parser.add_argument(
        "--check-log",
        type=Path,
        help="Append JSONL records of every check to this file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def resolve_game_state(
    args: argparse.Namespace, default_wild: Rank
) -> GameState | None:
    """Pick the round state from --round, --wild or the config default.

    Returns:
        GameState, or None if the wild rank or round is invalid.
    """
    if args.round is not None:
        try:
            return GameState.for_round(args.round)
        except ValueError as e:
            logger.error(str(e))
            return None
    if args.wild is not None:
        wild_rank = parse_rank(args.wild)
        if wild_rank is None:
            logger.error(f"Invalid wild rank: {args.wild!r}")
            return None
        return GameState(wild_rank=wild_rank)
    return GameState(wild_rank=default_wild)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except (ValidationError, yaml.YAMLError) as e:
        setup_logging()
        logger.error(f"Invalid config file {args.config}: {e}")
        return EXIT_ERROR

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_scores:
        config.logging.show_scores = True
    if args.check_log:
        config.check_log = CheckLogConfig(enabled=True, output_path=str(args.check_log))

    # Setup logging
    setup_logging(config.logging.level)

    display = MeldDisplay(show_scores=config.logging.show_scores)

    game_state = resolve_game_state(args, config.rules.wild_rank)
    if game_state is None:
        return EXIT_BAD_INPUT

    if args.deck:
        display.print_deck(create_full_deck())

    if not args.hands:
        return EXIT_OK

    exit_code = EXIT_OK
    try:
        with CheckLogger(config.check_log) as check_logger:
            check_logger.log_session_start(game_state)
            display.print_round(game_state)
            display.print_separator()

            for text in args.hands:
                hand = Hand.try_from(text)
                if hand is None:
                    display.print_invalid_hand(text)
                    exit_code = EXIT_BAD_INPUT
                    continue

                run_result = Run.try_from(hand.cards, game_state)
                set_result = Set.try_from(hand.cards, game_state)
                check_logger.log_check(hand, game_state, run_result, set_result)
                display.print_hand_result(hand, run_result, set_result)

            check_logger.log_session_end()
            display.print_summary(check_logger.checks, check_logger.valid_checks)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return EXIT_ERROR
    except Exception as e:
        logger.exception(f"Check failed: {e}")
        return EXIT_ERROR

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
