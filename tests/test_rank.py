import csv

import pytest

from engine.clues import apply_guess
from engine.codec import encode_many
from engine.constraints import ConstraintState
from engine.errors import SecretIndexError, WordDecodeError
from starting_word.eval import main, rank_first_guesses


def test_rank_first_guesses(small_entries):
    ranked = rank_first_guesses(small_entries, 3)
    assert ranked == [("apple", 3), ("grape", 3), ("mango", 3), ("zzzzz", 9)]


def test_rank_top_and_workers(small_entries):
    assert rank_first_guesses(small_entries, 3, top=2) == [("apple", 3), ("grape", 3)]
    assert rank_first_guesses(small_entries, 3, workers=2) == rank_first_guesses(small_entries, 3)
    assert len(rank_first_guesses(small_entries, 3, top=None)) == 4


def test_rank_rejects_bad_prefix(small_entries):
    with pytest.raises(SecretIndexError):
        rank_first_guesses(small_entries, 0)
    with pytest.raises(SecretIndexError):
        rank_first_guesses(small_entries, 5)


def test_rank_cli_writes_csv(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    guesses = tmp_path / "allowed.txt"
    out = tmp_path / "ranked.csv"
    answers.write_text("apple\ngrape\nmango\n")
    guesses.write_text("zzzzz\n")

    main(["--answers", str(answers), "--guesses", str(guesses), "--out", str(out), "--no-progress"])

    printed = capsys.readouterr().out
    assert "Scoring 4 guesses against 3 answers" in printed
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["guess", "score", "avg_remaining"]
    assert rows[1] == ["apple", "3", "1.0"]
    assert rows[-1] == ["zzzzz", "9", "3.0"]


def test_rank_orders_distinct_scores():
    entries = encode_many(["apple", "grape", "mango", "zzzzz", "eeeee"])
    # eeeee keeps apple+grape together unless the secret is mango: 2 + 2 + 1
    assert rank_first_guesses(entries, 3) == [
        ("apple", 3),
        ("grape", 3),
        ("mango", 3),
        ("eeeee", 5),
        ("zzzzz", 9),
    ]


def _brute_force_ranking(words, num_answers):
    entries = encode_many(words)
    answers = entries[:num_answers]
    totals = []
    for j, guess in enumerate(entries):
        total = 0
        for secret in answers:
            state = apply_guess(ConstraintState(), guess, secret)
            total += sum(1 for w in answers if state.matches(w))
        totals.append((total, j))
    totals.sort()
    return [(words[j], total) for total, j in totals]


@pytest.mark.parametrize(
    "words,num_answers",
    [
        (["cigar", "rebut", "sissy", "humph", "awake", "blush", "focal", "evade", "naval", "serve", "zzzzz"], 10),
        (["total", "stoal", "allot", "tally", "alloy", "atoll", "zzzzz", "roate"], 6),
    ],
)
def test_rank_matches_brute_force(words, num_answers):
    expected = _brute_force_ranking(words, num_answers)
    ranked = rank_first_guesses(encode_many(words), num_answers, top=None)
    assert ranked == expected
    scores = [score for _, score in ranked]
    assert scores == sorted(scores)
    assert len(set(scores)) > 1


def test_rank_cli_input_error_policy(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    answers.write_text("apple\nxx,yy\ngrape\nmango\n")

    with pytest.raises(WordDecodeError):
        main(["--answers", str(answers), "--no-progress"])

    main(["--answers", str(answers), "--no-progress", "--skip-invalid"])
    assert "Scoring 3 guesses against 3 answers" in capsys.readouterr().out
