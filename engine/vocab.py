from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

from engine.codec import Word, encode
from engine.data_utils import load_word_file


class WordVocab:
    """
    Ordered guessable entries: the answers first, then the extra words
    that are valid guesses but never answers. `num_answers` is the length
    of the answer-only prefix.
    """

    def __init__(self, answers: List[str], extra_guesses: Iterable[str] = ()) -> None:
        if not isinstance(answers, list):
            raise TypeError("`answers` must be a list of strings")
        if not answers:
            raise ValueError("no answers provided")
        words = list(answers) + list(extra_guesses)
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all words must be str")

        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = words
        self._entries: List[Word] = [encode(w) for w in words]
        self._num_answers = len(answers)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_files(
        cls,
        answers_path: str,
        guesses_path: Optional[str] = None,
        *,
        dedupe: bool = True,
        skip_invalid: bool = False,
    ) -> "WordVocab":
        """
        Build a vocab from two flat word files.

        Parameters
        ----------
        answers_path : str
            Words that may be the secret.
        guesses_path : str, optional
            Extra words accepted as guesses only.
        dedupe : bool, default=True
            Keep the first occurrence of a word and drop later duplicates
            (so an extra guess already present as an answer stays an answer).
        skip_invalid : bool, default=False
            Drop malformed lines instead of raising WordDecodeError.
        """
        answers = load_word_file(answers_path, skip_invalid=skip_invalid)
        extras = load_word_file(guesses_path, skip_invalid=skip_invalid) if guesses_path else []
        if dedupe:
            answers, extras = _dedupe(answers, extras)
        return cls(answers, extras)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        day_column: Optional[str] = "day",
        dedupe: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV. Rows with a non-null `day_column` are
        answers, other rows are extra guesses. Without a day column every
        row is an answer.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError, TypeError
        """
        df = pd.read_csv(
            path,
            dtype={column: str},
            keep_default_na=False,
            na_values={day_column: [""]} if day_column else None,
        )
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")

        words = df[column].astype(str).str.strip().str.lower()
        if day_column is not None and day_column in df.columns:
            is_answer = df[day_column].notna()
        else:
            is_answer = pd.Series(True, index=df.index)

        # rows that are not five letters a-z are dropped
        valid = words.str.fullmatch(r"[a-z]{5}")
        answers = [w for w, a, ok in zip(words, is_answer, valid) if ok and a]
        extras = [w for w, a, ok in zip(words, is_answer, valid) if ok and not a]
        if dedupe:
            answers, extras = _dedupe(answers, extras)
        return cls(answers, extras)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of guessable entries (answers + extras)."""
        return len(self._words)

    @property
    def num_answers(self) -> int:
        return self._num_answers

    @property
    def entries(self) -> List[Word]:
        """Encoded entries; answers occupy [0, num_answers)."""
        return list(self._entries)

    def words(self) -> List[str]:
        """Return a copy of all entry tokens."""
        return list(self._words)

    def answers(self) -> List[str]:
        return self._words[: self._num_answers]

    def is_answer(self, idx: int) -> bool:
        return 0 <= idx < self._num_answers

    def contains(self, word: str) -> bool:
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

    def entry_at(self, idx: int) -> Word:
        if idx < 0 or idx >= len(self._entries):
            raise IndexError(f"index out of range: {idx}")
        return self._entries[idx]

    def to_indices(self, words: List[str]) -> List[int]:
        """Convert a list of words to indices; raise KeyError on the first missing."""
        return [self.index_of(w) for w in words]

    def to_words(self, indices: List[int]) -> List[str]:
        """Convert a list of indices to words; raise IndexError on the first invalid index."""
        return [self.word_at(i) for i in indices]


def _dedupe(answers: List[str], extras: List[str]) -> tuple[List[str], List[str]]:
    seen = set()
    clean_answers: List[str] = []
    for w in answers:
        if w not in seen:
            seen.add(w)
            clean_answers.append(w)
    clean_extras: List[str] = []
    for w in extras:
        if w not in seen:
            seen.add(w)
            clean_extras.append(w)
    return clean_answers, clean_extras
