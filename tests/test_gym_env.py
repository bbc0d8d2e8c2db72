import numpy as np

from engine.gym_env import GymWordleEnv
from engine.sampler import WordSampler


def test_gym_wordle_env_behavior(small_vocab):
    env = GymWordleEnv(small_vocab, WordSampler(small_vocab, seed=42), allow_probe_guesses=False)

    obs, info = env.reset(options={"target_idx": 2})
    mask = info["action_mask"]

    assert obs.shape == (288,)
    assert obs.dtype == np.float32
    assert mask.shape[0] == len(small_vocab)
    assert np.sum(mask) == 3

    obs2, reward, terminated, truncated, info2 = env.step(0)
    assert obs2.shape == (288,)
    assert isinstance(reward, float)
    assert terminated is False
    assert truncated is False
    assert np.sum(info2["action_mask"]) <= np.sum(mask)
    assert np.array_equal(env.get_action_mask(), info2["action_mask"])

    _, _, terminated, truncated, info3 = env.step(2)
    assert terminated is True
    assert truncated is False
    assert info3["solved"] is True


def test_running_out_of_guesses_truncates(small_vocab):
    env = GymWordleEnv(small_vocab, WordSampler(small_vocab, seed=0), allow_probe_guesses=True, max_guesses=1)
    env.reset(seed=3, options={"target_idx": 0})
    _, _, terminated, truncated, _ = env.step(3)
    assert terminated is False
    assert truncated is True
