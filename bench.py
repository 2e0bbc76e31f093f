"""Benchmark model building and sentence generation on a slice of the Sci-Fi Gutenberg dataset.

Outputs a markdown row with the columns:
  Corpus Size | Distinct Tokens | Build Time | Build Throughput |
  Generation Throughput | '?' Hit Rate | '!' Hit Rate
"""

import argparse
import logging
import random
import time

from datasets import load_dataset

from wordwalk import SentenceGenerator, build_model
from wordwalk._sanitise import replace_non_printable

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"


def load_corpus(num_docs: int | None) -> list[str]:
    """Load up to `num_docs` documents via dataset indexing; full dataset when None."""
    print(f"Loading {HF_DATASET} (non-streaming) …")
    ds = load_dataset(HF_DATASET, split="train")
    if num_docs is not None:
        return ds[:num_docs]["text"]
    return ds["text"]


def hit_rate(gen: SentenceGenerator, target: str, samples: int, attempts: int) -> float:
    """Fraction of rejection-sampling runs that found a sentence ending in `target`."""
    hits = sum(
        gen.generate_ending_in(target, attempts) is not None for _ in range(samples)
    )
    return hits / samples


def main() -> None:
    """Run the build/generate benchmark and print a markdown row."""
    parser = argparse.ArgumentParser(
        description="Benchmark wordwalk build_model() and sentence generation."
    )
    parser.add_argument(
        "--num-docs",
        type=int,
        default=100,
        help="Number of documents to load (default: 100).",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=200,
        help="Sentences generated per measurement (default: 200).",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=1000,
        help="Rejection-sampling attempts per targeted sentence (default: 1000).",
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show library logs.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    docs = load_corpus(args.num_docs)
    if not docs:
        raise RuntimeError("No documents loaded from dataset.")

    buffer = replace_non_printable("\n".join(docs).encode("utf-8"))
    corpus_mb = len(buffer) / (1024 * 1024)

    # --- Build ---
    t0 = time.perf_counter()
    model = build_model(buffer)
    build_secs = time.perf_counter() - t0
    stats = model.stats()

    # --- Generation ---
    gen = SentenceGenerator(model, rng=random.Random(args.seed))
    t0 = time.perf_counter()
    for _ in range(args.samples):
        gen.generate()
    gen_rate = args.samples / (time.perf_counter() - t0)

    question = hit_rate(gen, "?", args.samples, args.attempts)
    exclaim = hit_rate(gen, "!", args.samples, args.attempts)

    # --- Output ---
    print()
    header = (
        f"| {'Corpus Size':12} | {'Distinct Tokens':15} | {'Build Time':10} "
        f"| {'Build Throughput':16} | {'Generation Throughput':24} "
        f"| {'? Hit Rate':10} | {'! Hit Rate':10} |"
    )
    sep = (
        f"| {'-' * 12} | {'-' * 15} | {'-' * 10} "
        f"| {'-' * 16} | {'-' * 24} "
        f"| {'-' * 10} | {'-' * 10} |"
    )
    row = (
        f"| {f'{corpus_mb:.2f} MB':12} | {stats.n_distinct:15,} | {f'{build_secs:.2f} secs':10} "
        f"| {f'{corpus_mb / build_secs:.2f} MB/sec':16} "
        f"| {f'{gen_rate:,.0f} sentences/sec':24} "
        f"| {f'{question:.1%}':10} | {f'{exclaim:.1%}':10} |"
    )
    print(header)
    print(sep)
    print(row)
    print()


if __name__ == "__main__":
    main()
