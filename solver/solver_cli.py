"""
solver/solver_cli.py

Run greedy trials against known secrets and report guess counts.

- `--secret I` plays one trial on answer index I (with --debug it prints
  every chosen guess and the surviving candidates).
- `--trials N` plays N trials on evenly spaced answers
  (i * (num_answers // N)) and prints the average.
- `--sample K` plays K trials on randomly drawn answers (see --seed).

Trials needing more than --budget guesses are flagged; they are a
strategy regression, not an error.

Run:
  python -m solver.solver_cli --answers answers.txt --guesses allowed.txt --secret 445 --debug
  python -m solver.solver_cli --csv word_list.csv --trials 50 --workers 8
"""
from __future__ import annotations

import argparse
import threading
import time
from typing import List, Optional

from engine.sampler import WordSampler
from engine.vocab import WordVocab
from solver.greedy import DEFAULT_MAX_GUESSES, DEFAULT_OPENING_GUESS, GreedyResult, solve_greedy


def evenly_spaced_secrets(num_answers: int, num_trials: int) -> List[int]:
    """Secret indices i * (num_answers // num_trials) for i in range(num_trials)."""
    if num_trials <= 0:
        raise ValueError("num_trials must be positive")
    if num_trials > num_answers:
        raise ValueError(f"cannot run {num_trials} trials over {num_answers} answers")
    step = num_answers // num_trials
    return [i * step for i in range(num_trials)]


def run_trials(
    vocab: WordVocab,
    secret_indices: List[int],
    *,
    opening_guess: str = DEFAULT_OPENING_GUESS,
    workers: int = 1,
    budget: int = DEFAULT_MAX_GUESSES,
    cancel: Optional[threading.Event] = None,
    debug: bool = False,
) -> List[GreedyResult]:
    entries = vocab.entries
    results: List[GreedyResult] = []
    for idx in secret_indices:
        result = solve_greedy(
            entries,
            idx,
            vocab.num_answers,
            opening_guess=opening_guess,
            workers=workers,
            cancel=cancel,
            debug=debug,
        )
        flag = "" if result.within_budget(budget) else f"  <-- over budget ({budget})"
        print(f"{result.secret}: {result.num_guesses} guesses ({' '.join(result.guesses)}){flag}", flush=True)
        results.append(result)
    return results


def summarize(results: List[GreedyResult], budget: int = DEFAULT_MAX_GUESSES) -> dict:
    counts = [r.num_guesses for r in results]
    over = [r.secret for r in results if not r.within_budget(budget)]
    return {
        "trials": len(counts),
        "avg_guesses": sum(counts) / len(counts) if counts else float("nan"),
        "max_guesses": max(counts) if counts else 0,
        "over_budget": over,
    }


def _load_vocab(args) -> WordVocab:
    if args.csv:
        return WordVocab.from_csv(args.csv)
    return WordVocab.from_files(args.answers, args.guesses, skip_invalid=args.skip_invalid)


def main(argv: List[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Greedy Wordle solver trials")
    ap.add_argument("--answers", help="Flat file of answer words (one per line)")
    ap.add_argument("--guesses", help="Flat file of extra allowed guesses (one per line)")
    ap.add_argument("--csv", help="word_list.csv with 'word' and 'day' columns (instead of --answers)")
    ap.add_argument("--skip-invalid", action="store_true", help="Drop malformed lines instead of failing")
    ap.add_argument("--secret", type=int, action="append", default=[], help="Answer index to solve (repeatable)")
    ap.add_argument("--trials", type=int, default=None, help="Run N trials on evenly spaced answers")
    ap.add_argument("--sample", type=int, default=None, help="Run K trials on randomly drawn answers")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for --sample")
    ap.add_argument("--opening", default=DEFAULT_OPENING_GUESS, help="Fixed opening guess")
    ap.add_argument("--workers", type=int, default=1, help="Worker processes per scoring round")
    ap.add_argument("--budget", type=int, default=DEFAULT_MAX_GUESSES, help="Guess budget used to flag slow trials")
    ap.add_argument("--debug", action="store_true", help="Print every round")
    args = ap.parse_args(argv)

    if not args.csv and not args.answers:
        ap.error("one of --answers or --csv is required")
    if not (args.secret or args.trials or args.sample):
        ap.error("nothing to do: pass --secret, --trials or --sample")

    vocab = _load_vocab(args)
    print(f"Loaded {vocab.num_answers} answers and {len(vocab) - vocab.num_answers} extra guesses", flush=True)

    common = dict(opening_guess=args.opening, workers=args.workers, budget=args.budget)

    for idx in args.secret:
        results = run_trials(vocab, [idx], debug=args.debug, **common)
        print(results[0].num_guesses)

    batches = []
    if args.trials:
        batches.append(("greedy avg", evenly_spaced_secrets(vocab.num_answers, args.trials)))
    if args.sample:
        sampler = WordSampler(vocab, seed=args.seed)
        batches.append(("sampled avg", sampler.batch_indices(args.sample, unique=args.sample <= vocab.num_answers)))

    for label, indices in batches:
        t0 = time.perf_counter()
        results = run_trials(vocab, indices, **common)
        stats = summarize(results, args.budget)
        dt = time.perf_counter() - t0
        print(f"{label}: {stats['avg_guesses']:.2f} (max {stats['max_guesses']}, {stats['trials']} trials, {dt:.2f}s)")
        if stats["over_budget"]:
            print(f"over budget ({args.budget}): {', '.join(stats['over_budget'])}")


if __name__ == "__main__":
    main()
