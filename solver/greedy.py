"""
solver/greedy.py

Greedy narrowing search for a known secret.

Each round scores every guessable entry by the total number of
candidates it would leave, summed over every candidate taken as the
secret (with all guesses so far replayed against it), then plays the
lowest-scoring entry against the real secret. Repeats until a single
candidate remains.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np

from engine.codec import Word, as_word, decode
from engine.constraints import filter_candidates
from engine.errors import SearchDivergenceError, SecretIndexError, TrialCancelled
from engine.trial import Trial
from solver.scoring import parallel_scores

# High-information opener found offline by the first-guess ranking.
DEFAULT_OPENING_GUESS = "roate"
DEFAULT_MAX_GUESSES = 6


@dataclass
class GreedyResult:
    secret: str
    guesses: List[str] = field(default_factory=list)
    # candidates left after each guess, opening guess included
    candidate_counts: List[int] = field(default_factory=list)

    @property
    def num_guesses(self) -> int:
        return len(self.guesses)

    def within_budget(self, budget: int = DEFAULT_MAX_GUESSES) -> bool:
        return self.num_guesses <= budget


def pick_best_guess(scores: np.ndarray) -> int:
    """Index of the lowest score; ties go to the lowest index."""
    if len(scores) == 0:
        raise ValueError("no scores to choose from")
    return int(np.argmin(scores))


def _check_indices(entries: Sequence[Word], secret_idx: int, num_answers: int) -> None:
    if num_answers <= 0 or num_answers > len(entries):
        raise SecretIndexError(f"num_answers must be in 1..{len(entries)}, got {num_answers}")
    if not 0 <= secret_idx < num_answers:
        raise SecretIndexError(f"secret index {secret_idx} outside answer range 0..{num_answers - 1}")


def solve_greedy(
    entries: Sequence[Word],
    secret_idx: int,
    num_answers: int,
    *,
    opening_guess: Union[str, Word] = DEFAULT_OPENING_GUESS,
    workers: int = 1,
    cancel: Optional[threading.Event] = None,
    debug: bool = False,
) -> GreedyResult:
    """
    Run the greedy search against `entries[secret_idx]`.

    Parameters
    ----------
    entries : sequence of Word
        All guessable entries; answers occupy the first `num_answers`.
    secret_idx : int
        Index of the true secret, must be < num_answers.
    opening_guess : str or Word
        Fixed first guess; it is not recomputed.
    workers : int
        Worker processes used to score each round.
    cancel : threading.Event, optional
        Checked before each round; when set the trial stops with
        TrialCancelled. A round in progress always completes.
    debug : bool
        Print each chosen guess and the surviving candidates.

    Raises
    ------
    SecretIndexError
        Bad `secret_idx` / `num_answers`.
    SearchDivergenceError
        The candidate set emptied, the search repeated a guess, or it converged to a word other
        than the secret.
    """
    _check_indices(entries, secret_idx, num_answers)
    entries = [tuple(e) for e in entries]
    secret = entries[secret_idx]
    opening = as_word(opening_guess)

    trial = Trial(secret)
    trial.apply_guess(opening)
    guesses: List[Word] = [opening]
    candidates = filter_candidates(entries[:num_answers], trial.state)
    result = GreedyResult(secret=decode(secret), guesses=[decode(opening)], candidate_counts=[len(candidates)])
    if not candidates:
        raise SearchDivergenceError(f"no candidates left after opening guess {decode(opening)!r}")

    while len(candidates) > 1:
        if cancel is not None and cancel.is_set():
            raise TrialCancelled(f"trial for {result.secret!r} cancelled after {len(guesses)} guesses")

        scores = parallel_scores(entries, candidates, candidates, guesses, workers=workers)
        best_guess = entries[pick_best_guess(scores)]
        # a repeat adds no clues, so with more than one candidate left it can never score best
        if best_guess in guesses:
            raise SearchDivergenceError(f"greedy search repeated guess {decode(best_guess)!r} with {len(candidates)} candidates left")
        if debug:
            print(f"best_guess: {decode(best_guess)}", flush=True)

        guesses.append(best_guess)
        trial.apply_guess(best_guess)
        next_candidates = filter_candidates(candidates, trial.state)
        if not next_candidates:
            raise SearchDivergenceError(
                f"candidate set emptied after guess {decode(best_guess)!r} (secret {result.secret!r})"
            )

        candidates = next_candidates

        result.guesses.append(decode(best_guess))
        result.candidate_counts.append(len(candidates))
        if debug:
            print("new valid answers:", ", ".join(decode(w) for w in candidates), flush=True)

    if candidates[0] != secret:
        raise SearchDivergenceError(
            f"converged to {decode(candidates[0])!r} instead of secret {result.secret!r}"
        )
    if debug:
        print("Guesses:", " ".join(result.guesses), flush=True)
    return result


def run_greedy_trial(
    entries: Sequence[Word],
    secret_idx: int,
    num_answers: int,
    **kwargs,
) -> int:
    """Number of guesses the greedy search needs, opening guess included."""
    return solve_greedy(entries, secret_idx, num_answers, **kwargs).num_guesses
