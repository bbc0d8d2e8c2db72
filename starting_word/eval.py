"""
starting_word/eval.py

Rank first guesses by how far, on average, they cut down the answer set.

For every answer taken as the secret and every guessable entry, derive
the clues that entry would produce and count how many answers are still
consistent with them. Totals are summed per entry; lower is better.
A single exhaustive pass, no iteration.

Usage:
  python -m starting_word.eval --answers answers.txt --guesses allowed.txt
  python -m starting_word.eval --csv word_list.csv --top 20 --workers 8
"""

from __future__ import annotations

import argparse
import csv
import time
from typing import List, Sequence, Tuple

from engine.codec import Word, decode
from engine.errors import SecretIndexError
from engine.vocab import WordVocab
from solver.scoring import parallel_scores

DEFAULT_TOP = 50


def rank_first_guesses(
    entries: Sequence[Word],
    num_answers: int,
    *,
    top: int | None = DEFAULT_TOP,
    workers: int = 1,
    progress: bool = False,
) -> List[Tuple[str, int]]:
    """
    Score every entry as an opening guess against the answer prefix.

    Parameters
    ----------
    entries : sequence of Word
        All guessable entries; answers occupy the first `num_answers`.
    top : int | None
        Keep only the best `top` rows; None keeps all of them.
    workers : int
        Worker processes for the per-secret loop.
    progress : bool
        Show a progress bar.

    Returns
    -------
    list[(word, score)]
        Best first; ties keep entry order.
    """
    if num_answers <= 0 or num_answers > len(entries):
        raise SecretIndexError(f"num_answers must be in 1..{len(entries)}, got {num_answers}")
    answers = list(entries[:num_answers])
    scores = parallel_scores(entries, answers, answers, workers=workers, progress=progress, desc="Ranking")

    # sorted() is stable, so equal scores stay in entry order
    order = sorted(range(len(entries)), key=lambda j: int(scores[j]))
    if top is not None:
        order = order[:top]
    return [(decode(entries[j]), int(scores[j])) for j in order]


def _print_top(results: List[Tuple[str, int]], num_answers: int) -> None:
    print(f"\nTop {len(results)} first guesses by total answers remaining:")
    print(f"{'rank':>4}  {'guess':<8}  {'score':>10}  {'avg_rem':>8}")
    for idx, (guess, score) in enumerate(results):
        print(f"{idx:>4}  {guess:<8}  {score:>10}  {score / num_answers:>8.2f}")


def _write_csv(results: List[Tuple[str, int]], path: str, num_answers: int) -> None:
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["guess", "score", "avg_remaining"])
        for guess, score in results:
            writer.writerow([guess, score, round(score / num_answers, 4)])


def main(argv: List[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Rank first guesses by average search-space reduction.")
    ap.add_argument("--answers", help="Flat file of answer words (one per line)")
    ap.add_argument("--guesses", help="Flat file of extra allowed guesses (one per line)")
    ap.add_argument("--csv", help="word_list.csv with 'word' and 'day' columns (instead of --answers)")
    ap.add_argument("--skip-invalid", action="store_true", help="Drop malformed lines instead of failing")
    ap.add_argument("--top", type=int, default=DEFAULT_TOP, help="How many top rows to report")
    ap.add_argument("--out", default=None, help="Optional output CSV path")
    ap.add_argument("--workers", type=int, default=1, help="Worker processes")
    ap.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show progress during evaluation (use --no-progress to disable)",
    )
    args = ap.parse_args(argv)

    if args.csv:
        vocab = WordVocab.from_csv(args.csv)
    elif args.answers:
        vocab = WordVocab.from_files(args.answers, args.guesses, skip_invalid=args.skip_invalid)
    else:
        ap.error("one of --answers or --csv is required")

    print(f"Scoring {len(vocab)} guesses against {vocab.num_answers} answers...", flush=True)
    t0 = time.perf_counter()
    results = rank_first_guesses(
        vocab.entries, vocab.num_answers, top=args.top, workers=args.workers, progress=args.progress
    )
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)

    _print_top(results, vocab.num_answers)
    if args.out:
        _write_csv(results, args.out, vocab.num_answers)
        print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
