"""
constraints.py

Keeps track of accumulated Wordle clues and filters candidate words.

State
-----
- match[i]:     the letter known to sit at position i, or UNKNOWN_LETTER
- excluded[i]:  LetterBitset of letters that cannot sit at position i
- must_contain: LetterBitset of letters that must appear somewhere

Clues only ever accumulate; nothing here removes one.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from engine.bitset import covers, letters_of
from engine.codec import UNKNOWN_LETTER, WORD_LENGTH, Word


class ConstraintState:
    __slots__ = ("match", "excluded", "must_contain")

    def __init__(self) -> None:
        self.match: List[int] = [UNKNOWN_LETTER] * WORD_LENGTH
        self.excluded: List[int] = [0] * WORD_LENGTH
        self.must_contain: int = 0

    def matches(self, word: Word) -> bool:
        """
        Return True iff `word` is consistent with every clue held.

        Pure predicate: the state is never touched, so one state can be
        evaluated against many words.
        """
        in_word = 0
        match = self.match
        excluded = self.excluded
        for i in range(WORD_LENGTH):
            letter = word[i]
            known = match[i]
            if known != UNKNOWN_LETTER and known != letter:
                return False
            bit = 1 << letter
            if bit & excluded[i]:
                return False
            in_word |= bit
        return covers(in_word, self.must_contain)

    def copy(self) -> "ConstraintState":
        other = ConstraintState.__new__(ConstraintState)
        other.match = list(self.match)
        other.excluded = list(self.excluded)
        other.must_contain = self.must_contain
        return other

    def key(self) -> Tuple[int, ...]:
        """Hashable snapshot; equal keys mean equal states."""
        return (*self.match, *self.excluded, self.must_contain)

    def describe(self) -> str:
        pattern = "".join("." if m == UNKNOWN_LETTER else chr(m + 97) for m in self.match)
        banned = [
            "".join(chr(li + 97) for li in letters_of(mask)) or "-"
            for mask in self.excluded
        ]
        must = "".join(chr(li + 97) for li in letters_of(self.must_contain)) or "-"
        return f"match={pattern} excluded={'/'.join(banned)} must={must}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintState):
            return NotImplemented
        return self.key() == other.key()

    def __repr__(self) -> str:
        return f"ConstraintState({self.describe()})"


def filter_candidates(words: Iterable[Word], state: ConstraintState) -> List[Word]:
    """Keep only words consistent with `state`, preserving order."""
    return [w for w in words if state.matches(w)]


def count_matches(words: Sequence[Word], state: ConstraintState) -> int:
    matches = state.matches
    n = 0
    for w in words:
        if matches(w):
            n += 1
    return n
