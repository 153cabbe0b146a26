"""
Command-line entry point: play a scripted sequence of tile drops.

Usage:
    wordfall config.yaml
    wordfall config.yaml --drops 3,3,4,2 --output results/game.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .game import GameConfig, GameSession, DropResult
from .utils.logger import configure_logging


def load_config(config_path: Optional[str]) -> GameConfig:
    """Load a game configuration from a YAML file (defaults when no path)."""
    if not config_path:
        return GameConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def parse_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def print_drop(result: DropResult, session: GameSession) -> None:
    if not result.accepted:
        print(f"Drop {result.letter} -> column {result.column}: rejected ({result.reason})")
        return

    row, col = result.landed_at
    print(f"Drop {result.letter} -> column {col}, landed at row {row}")
    for step in result.steps:
        words = ", ".join(
            f"{m.letters} ({m.direction})" for m in step.matches
        )
        print(f"  step {step.iteration}: {words}")
    print(session.grid.render())
    print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play a scripted wordfall game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  rows: 6
  cols: 7
  min_word_length: 3
  seed: 42
  tiles: [C, A, T, R, S]
  word_lists:
    - word_list/3_letter_words.csv
  words: [cat, art, tar]
  drops: [3, 3, 4, 2]
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used when omitted)"
    )
    parser.add_argument(
        "--drops",
        help="Comma separated column indices to drop into (overrides config)"
    )
    parser.add_argument(
        "--words",
        help="Comma separated extra dictionary words"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the board after every drop"
    )

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
        if args.drops:
            config.drops = [int(col) for col in parse_list(args.drops)]
        config.words.extend(parse_list(args.words))
        session = GameSession.from_config(config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Board: {config.rows}x{config.cols}, dictionary: {len(session.dictionary)} words")
        print()

    exit_code = 0
    try:
        for col in config.drops:
            result = session.drop(col)
            if args.verbose:
                print_drop(result, session)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
    except Exception as e:
        print(f"Error during game: {e}", file=sys.stderr)
        exit_code = 1

    # Partial results are still saved after an error
    result = session.get_result()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.model_dump_json(indent=2))
        if args.verbose:
            print(f"Results saved to: {output_path}")

    # Print summary
    print("=== Game Summary ===")
    print(f"Drops: {session.drop_count}")
    print(f"Words made: {', '.join(w.word for w in result.made_words) or '(none)'}")
    print(f"Score: {result.score}")
    print(session.grid.render())

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
