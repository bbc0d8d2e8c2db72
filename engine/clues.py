"""
clues.py

Derives clues for one guess against a known secret and folds them into a
ConstraintState.

Per position i the guessed letter is classified as
  - EXACT   (2): guess[i] == secret[i]        -> match[i] = letter
  - PRESENT (1): letter is elsewhere in secret -> excluded[i] |= letter
  - ABSENT  (0): letter nowhere in secret      -> excluded[j] |= letter for all j

PRESENT is decided from the secret's membership mask, not a per-position
compare, so a letter that is exact at one position and guessed again at
another is never treated as absent. Both EXACT and PRESENT add the letter
to must_contain.
"""

from __future__ import annotations

from typing import List, Optional

from engine.bitset import word_mask
from engine.codec import WORD_LENGTH, Word
from engine.constraints import ConstraintState

ABSENT = 0
PRESENT = 1
EXACT = 2

_PATTERN_CHARS = {ABSENT: "b", PRESENT: "y", EXACT: "g"}


def apply_guess(
    state: ConstraintState,
    guess: Word,
    secret: Word,
    secret_mask: Optional[int] = None,
) -> ConstraintState:
    """
    Fold the clues of `guess` against `secret` into `state` (in place).

    `secret_mask` is the secret's membership mask; pass it when applying
    many guesses against the same secret to avoid recomputing it.
    Returns `state` for chaining.
    """
    if secret_mask is None:
        secret_mask = word_mask(secret)
    excluded = state.excluded
    for i in range(WORD_LENGTH):
        letter = guess[i]
        bit = 1 << letter
        in_secret = bit & secret_mask
        state.must_contain |= in_secret
        if letter == secret[i]:
            state.match[i] = letter
        elif in_secret:
            excluded[i] |= bit
        else:
            for j in range(WORD_LENGTH):
                excluded[j] |= bit
    return state


def classify(guess: Word, secret: Word) -> List[int]:
    """Per-position feedback codes in {ABSENT, PRESENT, EXACT}."""
    secret_mask = word_mask(secret)
    pattern = []
    for g, s in zip(guess, secret):
        if g == s:
            pattern.append(EXACT)
        elif secret_mask & (1 << g):
            pattern.append(PRESENT)
        else:
            pattern.append(ABSENT)
    return pattern


def pattern_to_str(pattern: List[int]) -> str:
    """Render feedback codes as g/y/b (green/yellow/black)."""
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have length {WORD_LENGTH}")
    try:
        return "".join(_PATTERN_CHARS[p] for p in pattern)
    except KeyError as e:
        raise ValueError(f"pattern elements must be in {{0,1,2}}, got {e.args[0]!r}") from None
