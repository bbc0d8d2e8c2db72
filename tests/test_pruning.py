from engine.clues import apply_guess
from engine.codec import decode, encode, encode_many
from engine.constraints import ConstraintState, count_matches, filter_candidates


def _state(guess, secret):
    return apply_guess(ConstraintState(), encode(guess), encode(secret))


def test_pruning_after_allot_clues():
    words = encode_many(["total", "stoal", "allot", "tally", "alloy", "atoll"])
    state = _state("allot", "total")

    remaining = [decode(w) for w in filter_candidates(words, state)]

    # "total" and "stoal" are consistent; others are not.
    assert remaining == ["total", "stoal"]
    assert count_matches(words, state) == 2


def test_pruning_is_monotonic_with_more_clues():
    words = encode_many(["total", "stoal", "bleed", "blend"])
    state = _state("allot", "total")
    rem1 = set(filter_candidates(words, state))
    apply_guess(state, encode("stoal"), encode("total"))
    rem2 = set(filter_candidates(words, state))
    assert rem2.issubset(rem1)
    assert rem2 == {encode("total")}


def test_empty_state_matches_everything():
    state = ConstraintState()
    words = encode_many(["apple", "zzzzz", "quiet"])
    assert filter_candidates(words, state) == words


def test_matches_checks_position_exclusion_and_coverage():
    # apple vs grape: e is exact, a/p misplaced, l absent
    state = _state("apple", "grape")
    assert state.matches(encode("grape"))
    assert not state.matches(encode("apple"))  # a excluded at position 0
    assert not state.matches(encode("mango"))  # e required at position 4
    assert not state.matches(encode("crate"))  # p required somewhere


def test_matches_does_not_mutate_state():
    state = _state("apple", "grape")
    before = state.key()
    for w in encode_many(["grape", "apple", "mango", "zzzzz"]):
        state.matches(w)
    assert state.key() == before


def test_copy_is_independent():
    state = _state("apple", "grape")
    other = state.copy()
    apply_guess(other, encode("mango"), encode("grape"))
    assert other != state
    assert state == _state("apple", "grape")


def test_describe():
    text = _state("allot", "total").describe()
    assert text == "match=..... excluded=a/l/l/o/t must=alot"
