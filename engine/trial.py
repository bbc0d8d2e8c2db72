"""
trial.py

A Trial owns a ConstraintState together with the hidden secret it is
being played against. Guesses are applied through the stateless
`apply_guess`; `with_guess` forks a copy so hypotheticals never leak back.
"""

from __future__ import annotations

from typing import Iterable

from engine.bitset import word_mask
from engine.clues import apply_guess
from engine.codec import Word, decode
from engine.constraints import ConstraintState


class Trial:
    __slots__ = ("secret", "secret_mask", "state")

    def __init__(self, secret: Word, state: ConstraintState | None = None) -> None:
        self.secret: Word = tuple(secret)
        self.secret_mask: int = word_mask(self.secret)
        self.state: ConstraintState = state if state is not None else ConstraintState()

    def apply_guess(self, guess: Word) -> None:
        apply_guess(self.state, guess, self.secret, self.secret_mask)

    def apply_guesses(self, guesses: Iterable[Word]) -> None:
        for g in guesses:
            apply_guess(self.state, g, self.secret, self.secret_mask)

    def with_guess(self, guess: Word) -> "Trial":
        """Return a new Trial with `guess` applied; `self` is left unchanged."""
        other = Trial.__new__(Trial)
        other.secret = self.secret
        other.secret_mask = self.secret_mask
        other.state = self.state.copy()
        apply_guess(other.state, guess, self.secret, self.secret_mask)
        return other

    def matches(self, word: Word) -> bool:
        return self.state.matches(word)

    def is_solved_by(self, guess: Word) -> bool:
        return tuple(guess) == self.secret

    def __repr__(self) -> str:
        return f"Trial(secret={decode(self.secret)!r}, {self.state.describe()})"
