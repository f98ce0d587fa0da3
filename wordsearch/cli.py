"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from .core.constants import DEFAULT_PROBE_LIMIT, DirectionSampling
from .core.exceptions import ConfigurationError, WordSearchError
from .data.word_source import collect_words, parse_min_length
from .engine.generator import EngineConfig, PuzzleEngine
from .utils.logger import configure_logging, get_logger
from .utils.pretty import print_puzzle_report


LOGGER = get_logger(__name__)

USAGE = "Usage: {prog} -n [FILE]...\nWhere: n - Shortest word length\n"


class PuzzleArgumentParser(argparse.ArgumentParser):
    """Argument parser whose failures exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = PuzzleArgumentParser(
        prog=prog,
        usage="%(prog)s -N FILE... [options]",
        description="Generate a word search puzzle from the words found in text files",
    )
    parser.add_argument("files", nargs="+", type=Path, metavar="FILE", help="Text files to scan")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--dimension",
        type=int,
        default=None,
        help="Override the computed grid dimension",
    )
    parser.add_argument(
        "--probe-limit",
        type=int,
        default=DEFAULT_PROBE_LIMIT,
        help="Random probes per word before giving up (default 100)",
    )
    parser.add_argument(
        "--permutation",
        action="store_true",
        help="Try each direction at most once per probe",
    )
    parser.add_argument(
        "--show-words",
        action="store_true",
        help="List the capitalized words after the grid",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    prog = Path(sys.argv[0]).name or "wordsearch"
    if len(argv) < 2:
        sys.stderr.write(USAGE.format(prog=prog))
        return 1

    # The threshold always comes first and may look like an unknown option.
    threshold, rest = argv[0], argv[1:]
    try:
        min_length = parse_min_length(threshold)
    except ConfigurationError as exc:
        sys.stderr.write(f"ERROR! {exc}\n")
        return 1

    parser = build_parser(prog)
    args = parser.parse_args(rest)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    collection = collect_words(args.files, min_length)
    LOGGER.info("Collected %s words from %s file(s)", len(collection.words), len(args.files))
    config = EngineConfig(
        seed=args.seed,
        probe_limit=args.probe_limit,
        dimension=args.dimension,
        direction_sampling=(
            DirectionSampling.PERMUTATION if args.permutation else DirectionSampling.REPLACEMENT
        ),
    )
    try:
        result = PuzzleEngine(collection.words, config).build()
    except WordSearchError as exc:
        sys.stderr.write(f"ERROR! {exc}\n")
        return 1

    print_puzzle_report(result, show_words=args.show_words)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
