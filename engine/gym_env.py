from __future__ import annotations
import numpy as np
import gymnasium as gym
from gymnasium import spaces

from engine.env import OBS_SIZE, WordleEnv
from engine.vocab import WordVocab
from engine.sampler import WordSampler


class GymWordleEnv(gym.Env):
    """
    Gymnasium wrapper around WordleEnv.
    - Observation: 288-dim float32 vector (see WordleEnv docstring)
    - Action space: Discrete(len(vocab)), answers first then extra guesses
    - info contains an 'action_mask' (int8 array) for valid actions at each step.
    """

    metadata = {"render_modes": []}

    def __init__(self, vocab: WordVocab, sampler: WordSampler, **kwargs) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")

        self.env = WordleEnv(vocab, sampler, **kwargs)
        self.vocab = vocab
        self._last_mask = None

        self.observation_space = spaces.Box(
            low=0.0, high=np.inf, shape=(OBS_SIZE,), dtype=np.float32
        )
        self.action_space = spaces.Discrete(len(vocab))

    def reset(self, *, seed: int | None = None, options: dict | None = None):
        super().reset(seed=seed)
        if seed is not None:
            self.env.sampler.set_seed(seed)
        target_idx = (options or {}).get("target_idx")
        obs, mask = self.env.reset(target_idx=target_idx)
        obs = np.asarray(obs, dtype=np.float32)
        info = {"action_mask": np.asarray(mask, dtype=np.int8)}
        self._last_mask = info["action_mask"]
        return obs, info

    def step(self, action: int):
        action = int(action)
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")

        obs, reward, done, info, mask = self.env.step(action)

        obs = np.asarray(obs, dtype=np.float32)
        info = dict(info)
        info["action_mask"] = np.asarray(mask, dtype=np.int8)
        self._last_mask = info["action_mask"]

        solved = bool(info["solved"])
        terminated = solved
        # running out of guesses is a time limit, not a terminal state
        truncated = bool(done) and not solved
        return obs, float(reward), terminated, truncated, info

    def get_action_mask(self) -> np.ndarray:
        """
        Return the latest valid action mask as an int8 numpy array
        (the hook sb3-contrib's ActionMasker expects).
        """
        if self._last_mask is None:
            _, info = self.reset()
            return info["action_mask"]
        return self._last_mask
