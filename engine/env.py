"""
env.py

A step-by-step Wordle environment built on a Trial, usable from an RL
loop or for driving the solver one guess at a time.

- Discrete actions: indices into the WordVocab entries
- Observations: the accumulated clues plus candidate-set summary
- Rewards: bits of information gained, minus a per-step penalty, plus a
  success bonus when the secret itself is guessed
"""

from __future__ import annotations

import math
from typing import List, Tuple, Optional

from engine.bitset import has_letter
from engine.clues import classify, pattern_to_str
from engine.codec import ALPHABET_SIZE, UNKNOWN_LETTER, WORD_LENGTH
from engine.errors import SecretIndexError
from engine.sampler import WordSampler
from engine.trial import Trial
from engine.vocab import WordVocab

OBS_SIZE = 2 * WORD_LENGTH * ALPHABET_SIZE + ALPHABET_SIZE + 2


class WordleEnv:
    """
    Wordle environment.

    API
    ---
    reset(target_idx: Optional[int] = None) -> tuple[list[float], list[int]]
        Starts a new episode. `target_idx` must lie in the answer prefix.
        Returns (observation, action_mask).

    step(action_idx: int) -> tuple[list[float], float, bool, dict, list[int]]
        Applies a guess. Returns (observation, reward, done, info, action_mask).

    Observation
    -----------
    A 1D vector composed of:
      - match one-hot per position (5*26)
      - excluded bits per position (5*26)
      - must-contain bits (26)
      - log(1 + #candidates) (1 float)
      - step index scaled by max steps (1 float)
    Total length = 130 + 130 + 26 + 1 + 1 = 288

    Action Mask
    -----------
    If `allow_probe_guesses` is False, mask allows only current candidates.
    If True, every entry is allowed.
    """

    def __init__(
        self,
        vocab: WordVocab,
        sampler: WordSampler,
        *,
        max_guesses: int = 6,
        info_weight: float = 1.0,   # reward per bit of information
        step_penalty: float = 1.0,
        success_bonus: float = 10.0,
        allow_probe_guesses: bool = False,
    ) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")

        self.vocab = vocab
        self.sampler = sampler
        self.max_guesses = int(max_guesses)
        self.info_weight = float(info_weight)
        self.step_penalty = float(step_penalty)
        self.success_bonus = float(success_bonus)
        self.allow_probe_guesses = bool(allow_probe_guesses)

        self._entries = vocab.entries
        self._target_idx: Optional[int] = None
        self._trial: Optional[Trial] = None
        self._history: List[Tuple[str, List[int]]] = []
        self._candidates: List[int] = []
        self._step: int = 0
        self._done: bool = False

    # -------------------------
    # Core env API
    # -------------------------
    def reset(self, target_idx: Optional[int] = None) -> tuple[list[float], list[int]]:
        """Start a new episode and return (observation, action_mask)."""
        if target_idx is None:
            target_idx = self.sampler.choice_index()
        elif not self.vocab.is_answer(target_idx):
            raise SecretIndexError(f"target_idx {target_idx} outside answer range 0..{self.vocab.num_answers - 1}")
        self._target_idx = target_idx
        self._trial = Trial(self._entries[target_idx])

        self._history = []
        self._step = 0
        self._done = False
        self._candidates = list(range(self.vocab.num_answers))

        return self._build_observation(), self._build_action_mask()

    def step(self, action_idx: int) -> tuple[list[float], float, bool, dict, list[int]]:
        """
        Take an action (guess index).

        Returns
        -------
        observation: list[float]
        reward: float
        done: bool
        info: dict  (includes 'guess', 'pattern', 'remaining')
        action_mask: list[int]
        """
        if self._trial is None:
            raise RuntimeError("call reset() before step()")
        if self._done:
            raise RuntimeError("episode finished; call reset()")
        if action_idx < 0 or action_idx >= len(self.vocab):
            raise IndexError(f"action index out of range: {action_idx}")
        if (not self.allow_probe_guesses) and (action_idx not in self._candidates):
            raise ValueError("action not allowed by current candidate set (set allow_probe_guesses=True to permit probes)")

        guess = self._entries[action_idx]
        pattern = classify(guess, self._trial.secret)
        before = len(self._candidates)

        self._trial.apply_guess(guess)
        self._candidates = [i for i in self._candidates if self._trial.matches(self._entries[i])]
        self._history.append((self.vocab.word_at(action_idx), pattern))
        self._step += 1

        solved = self._trial.is_solved_by(guess)
        reward = self.info_weight * math.log2(before / len(self._candidates)) - self.step_penalty
        if solved:
            reward += self.success_bonus
        done = solved or self._step >= self.max_guesses
        self._done = done

        info = {
            "guess": self.vocab.word_at(action_idx),
            "pattern": pattern_to_str(pattern),
            "remaining": len(self._candidates),
            "step": self._step,
            "solved": solved,
            "target": self.target if done else None,
        }
        return self._build_observation(), reward, done, info, self._build_action_mask()

    # -------------------------
    # Helpers
    # -------------------------
    def _build_action_mask(self) -> list[int]:
        """Return a 0/1 mask over every entry."""
        n = len(self.vocab)
        if self.allow_probe_guesses:
            return [1] * n
        allowed = set(self._candidates)
        return [1 if i in allowed else 0 for i in range(n)]

    def _build_observation(self) -> list[float]:
        state = self._trial.state
        match_feats = [0.0] * (WORD_LENGTH * ALPHABET_SIZE)
        excluded_feats: List[float] = []
        for pos in range(WORD_LENGTH):
            if state.match[pos] != UNKNOWN_LETTER:
                match_feats[pos * ALPHABET_SIZE + state.match[pos]] = 1.0
            mask = state.excluded[pos]
            excluded_feats.extend(1.0 if has_letter(mask, li) else 0.0 for li in range(ALPHABET_SIZE))
        must_feats = [1.0 if has_letter(state.must_contain, li) else 0.0 for li in range(ALPHABET_SIZE)]

        log_rem = math.log1p(len(self._candidates))
        step_scaled = self._step / max(1, self.max_guesses)
        return match_feats + excluded_feats + must_feats + [log_rem, step_scaled]

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def history(self) -> List[Tuple[str, List[int]]]:
        return list(self._history)

    @property
    def target(self) -> Optional[str]:
        if self._target_idx is None:
            return None
        return self.vocab.word_at(self._target_idx)

    @property
    def remaining_candidates(self) -> int:
        return len(self._candidates)

    @property
    def candidates(self) -> List[str]:
        return self.vocab.to_words(self._candidates)
