import math

from engine.env import WordleEnv
from engine.sampler import WordSampler


def _make_env(vocab, **kwargs):
    # default rewards: info_weight=1, step_penalty=1, success_bonus=10
    return WordleEnv(vocab, WordSampler(vocab, seed=0), **kwargs)


def test_information_reward_is_expected(small_vocab):
    env = _make_env(small_vocab)
    env.reset(target_idx=small_vocab.index_of("mango"))
    obs, reward, done, info, mask = env.step(small_vocab.index_of("apple"))
    # 3 candidates -> 1: log2(3) bits, minus the step penalty
    assert math.isclose(reward, math.log2(3) - 1.0)
    assert done is False


def test_exact_solution_reward_and_done(small_vocab):
    env = _make_env(small_vocab)
    env.reset(target_idx=2)
    env.step(0)
    obs, reward, done, info, mask = env.step(2)
    assert done is True
    assert info["solved"] is True
    assert info["target"] == "mango"
    assert reward == 9.0, f"expected 9.0 for a solve with no information left, got {reward}"


def test_uninformative_probe_costs_a_step(small_vocab):
    env = _make_env(small_vocab, allow_probe_guesses=True, max_guesses=1)
    obs, mask = env.reset(target_idx=1)
    assert mask == [1, 1, 1, 1]
    obs, reward, done, info, mask = env.step(3)
    assert reward == -1.0
    assert info["remaining"] == 3
    assert done is True and info["solved"] is False
    assert info["target"] == "grape"
