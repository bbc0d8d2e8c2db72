from __future__ import annotations

import random
from engine.vocab import WordVocab


class WordSampler:
    """Draws secret indices from the answer-only prefix of a vocab."""

    def __init__(self, vocab: WordVocab, seed: int | None = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if vocab.num_answers == 0:
            raise ValueError("vocab has no answers")

        self._vocab = vocab
        self._rng = random.Random(seed)
        self._seed = seed

    def set_seed(self, seed: int) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    def choice_index(self) -> int:
        return self._rng.randrange(self._vocab.num_answers)

    def choice_word(self) -> str:
        return self._vocab.word_at(self.choice_index())

    def batch_indices(self, k: int, *, unique: bool = False) -> list[int]:
        if not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        if unique:
            if k > self._vocab.num_answers:
                raise ValueError(f"cannot draw {k} unique secrets from {self._vocab.num_answers} answers")
            return self._rng.sample(range(self._vocab.num_answers), k)
        return [self.choice_index() for _ in range(k)]
