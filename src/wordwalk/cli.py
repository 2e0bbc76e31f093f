"""Command line entry point: print a question and an exclamation from a corpus."""

import argparse
import logging
import random
import sys

from .config import Settings
from .corpus import load_corpus
from .errors import CorpusError, GenerationError, InternerCapacityError
from .generator import SentenceGenerator
from .model import build_model

log = logging.getLogger(__name__)

TARGETS: tuple[str, ...] = ("?", "!")


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordwalk",
        description="Generate a question and an exclamation from a Markov model of a text.",
    )
    parser.add_argument(
        "corpus",
        nargs="?",
        default=settings.corpus,
        help=f"Text file to learn from (default: {settings.corpus}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed for reproducible output (default: random).",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=settings.max_length,
        help=f"Maximum sentence length in bytes (default: {settings.max_length}).",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=settings.max_attempts,
        help=f"Sentences sampled per target mark (default: {settings.max_attempts}).",
    )
    parser.add_argument(
        "--hash-size",
        type=int,
        default=settings.hash_size,
        help=f"Slots in the token hash index (default: {settings.hash_size}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log model statistics and timings to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        buffer = load_corpus(args.corpus)
        model = build_model(buffer, hash_size=args.hash_size)
    except (CorpusError, InternerCapacityError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sentences = []
    try:
        gen = SentenceGenerator(
            model, rng=random.Random(args.seed), max_length=args.max_length
        )
        for target in TARGETS:
            sentence = gen.generate_ending_in(target, args.max_attempts)
            if sentence is None:
                log.warning(f"skipping output for {target!r}")
                continue
            sentences.append(sentence)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if sentences:
        # sentences separated by a blank line
        print("\n\n".join(sentences))
    return 0


if __name__ == "__main__":
    sys.exit(main())
