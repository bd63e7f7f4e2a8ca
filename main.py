"""CLI entrypoint for the word search grid generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from wordsearch.core.constants import DEFAULT_MAX_ITERATIONS, DEFAULT_UNIQUE_ATTEMPTS, Strategy, TieBreaker
from wordsearch.core.exceptions import WordSearchError
from wordsearch.core.models import GenerationOptions
from wordsearch.data.words import filter_words_by_dimensions, parse_words_file, pick_random_words
from wordsearch.engine.strategy import generate
from wordsearch.engine.unique import generate_unique_word_grid
from wordsearch.engine.validator import GridValidator
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import pretty_print_grid, print_result_stats
from wordsearch.utils.rng import SeededRandom


LOGGER = get_logger("wordsearch.cli")


def parse_seed(value: str) -> Union[int, str]:
    """Numeric seeds stay numbers so ``--seed 1`` matches ``seed=1`` in code."""

    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search grids (words read left-to-right or top-to-bottom)",
    )
    parser.add_argument("--height", type=int, required=True, help="Grid height in cells")
    parser.add_argument("--width", type=int, required=True, help="Grid width in cells")
    parser.add_argument("--words", nargs="+", metavar="WORD", default=[], help="Words to hide")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--letters",
        type=str,
        default="",
        help="Extra filler letters, e.g. ABCXYZ (word letters are always allowed)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in Strategy],
        default=Strategy.FREE.value,
        help="Placement strategy",
    )
    parser.add_argument("--seed", type=parse_seed, default=None, help="Random seed (number or text)")
    parser.add_argument(
        "--tie-breaker",
        type=str,
        choices=[t.value for t in TieBreaker],
        default=TieBreaker.RANDOM.value,
        help="Ordering between equally scored placements (intersecting strategy)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        help="Search budget for the intersecting strategy",
    )
    parser.add_argument(
        "--fit-words",
        action="store_true",
        help="Drop words that do not fit both across and down instead of failing",
    )
    parser.add_argument("--pick", type=int, metavar="N", help="Use a random subset of N words")
    parser.add_argument(
        "--unique-word",
        type=str,
        metavar="WORD",
        help="Hide WORD exactly once in a grid made only of its own letters",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_UNIQUE_ATTEMPTS,
        help="Placement attempts for --unique-word",
    )
    parser.add_argument("--validate", action="store_true", help="Re-check the finished grid")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[str]:
    words: List[str] = list(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if args.fit_words:
        kept = filter_words_by_dimensions(words, args.width, args.height)
        if len(kept) < len(words):
            LOGGER.warning("Dropped %d words that do not fit the grid", len(words) - len(kept))
        words = kept
    if args.pick is not None:
        rng = SeededRandom(args.seed) if args.seed is not None else None
        words = pick_random_words(words, args.pick, rng)
    return words


def run(args: argparse.Namespace) -> int:
    if args.unique_word:
        grid = generate_unique_word_grid(
            args.width,
            args.height,
            args.unique_word,
            max_attempts=args.max_attempts,
            seed=args.seed,
        )
        rows = ["".join(row) for row in grid]
        if args.json:
            print(json.dumps({"grid": rows}, ensure_ascii=False, indent=2))
        else:
            pretty_print_grid(rows)
        return 0

    words = collect_words(args)
    letters = list(args.letters)
    options = GenerationOptions(
        strategy=args.strategy,
        seed=args.seed,
        tie_breaker=args.tie_breaker,
        max_iterations=args.max_iterations,
    )
    result = generate(words, letters, args.width, args.height, options)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_result_stats(result)

    if args.validate:
        validator = GridValidator(words, letters)
        validation = validator.validate(
            result,
            args.width,
            args.height,
            check_counts=options.strategy == Strategy.INTERSECTING,
        )
        if not validation.ok:
            for message in validation.messages:
                print(f"Validation: {message}", file=sys.stderr)
            return 2
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        return run(args)
    except WordSearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
