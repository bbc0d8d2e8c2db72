"""
solver/scoring.py

The "simulate one guess" primitive shared by the greedy search and the
first-guess ranking, plus its map-reduce over worker processes.

For every secret s and every entry g:
    state  = clues of (prior guesses..., g) against s
    score[g] += number of pool words still consistent with state

Lower totals mean g leaves fewer possibilities on average.

Parallel runs split the secrets into chunks; each worker fills a private
int64 vector and the vectors are summed element-wise at the end, so the
result is identical to a sequential run.
"""

from __future__ import annotations

from multiprocessing import Pool
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from engine.codec import Word
from engine.constraints import count_matches
from engine.trial import Trial


def accumulate_scores(
    entries: Sequence[Word],
    secrets: Sequence[Word],
    pool: Sequence[Word],
    prior_guesses: Sequence[Word] = (),
    out: Optional[np.ndarray] = None,
    memo: Optional[Dict[Tuple[int, ...], int]] = None,
) -> np.ndarray:
    """
    Add each entry's remaining-candidate counts over `secrets` into `out`.

    `memo` maps a state key to its match count over `pool`; many
    (secret, guess) pairs collapse to the same state, so reusing it
    across calls on the same pool saves most of the counting.
    """
    if out is None:
        out = np.zeros(len(entries), dtype=np.int64)
    elif out.shape != (len(entries),):
        raise ValueError(f"out must have shape ({len(entries)},), got {out.shape}")
    if memo is None:
        memo = {}

    for secret in secrets:
        base = Trial(secret)
        base.apply_guesses(prior_guesses)
        for j, guess in enumerate(entries):
            state = base.with_guess(guess).state
            key = state.key()
            n = memo.get(key)
            if n is None:
                n = count_matches(pool, state)
                memo[key] = n
            out[j] += n
    return out


# -----------------------------
# Worker-process plumbing
# -----------------------------

_ENTRIES: Sequence[Word] = ()
_POOL: Sequence[Word] = ()
_PRIOR: Sequence[Word] = ()
_MEMO: Dict[Tuple[int, ...], int] = {}


def _init_worker(entries: Sequence[Word], pool: Sequence[Word], prior_guesses: Sequence[Word]) -> None:
    global _ENTRIES, _POOL, _PRIOR, _MEMO
    _ENTRIES = entries
    _POOL = pool
    _PRIOR = prior_guesses
    _MEMO = {}


def _score_chunk(secrets: List[Word]) -> np.ndarray:
    return accumulate_scores(_ENTRIES, secrets, _POOL, _PRIOR, memo=_MEMO)


def _chunks(items: Sequence[Word], n_chunks: int) -> List[List[Word]]:
    n_chunks = max(1, min(n_chunks, len(items)))
    size, rem = divmod(len(items), n_chunks)
    out: List[List[Word]] = []
    start = 0
    for k in range(n_chunks):
        stop = start + size + (1 if k < rem else 0)
        out.append(list(items[start:stop]))
        start = stop
    return out


def parallel_scores(
    entries: Sequence[Word],
    secrets: Sequence[Word],
    pool: Sequence[Word],
    prior_guesses: Sequence[Word] = (),
    *,
    workers: int = 1,
    progress: bool = False,
    desc: str = "Scoring",
) -> np.ndarray:
    """
    Score every entry over all `secrets`, optionally across processes.

    Parameters
    ----------
    workers : int
        Number of worker processes; 1 or less scores in this process.
    progress : bool
        Show a tqdm bar over secrets (sequential) or chunks (parallel).
    """
    entries = list(entries)
    secrets = list(secrets)
    pool = list(pool)
    prior_guesses = list(prior_guesses)
    total = np.zeros(len(entries), dtype=np.int64)
    if not secrets:
        return total

    if workers <= 1:
        memo: Dict[Tuple[int, ...], int] = {}
        it = tqdm(secrets, desc=desc, unit="secret") if progress else secrets
        for secret in it:
            accumulate_scores(entries, (secret,), pool, prior_guesses, out=total, memo=memo)
        return total

    # a few chunks per worker keeps the tail short
    chunks = _chunks(secrets, workers * 4)
    with Pool(
        processes=workers,
        initializer=_init_worker,
        initargs=(entries, pool, prior_guesses),
    ) as procs:
        partials = procs.imap(_score_chunk, chunks)
        if progress:
            partials = tqdm(partials, total=len(chunks), desc=desc, unit="chunk")
        for partial in partials:
            total += partial
    return total
