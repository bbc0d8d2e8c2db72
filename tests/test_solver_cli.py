import pytest

from solver.solver_cli import evenly_spaced_secrets, main


@pytest.fixture
def word_files(tmp_path):
    answers = tmp_path / "answers.txt"
    guesses = tmp_path / "allowed.txt"
    answers.write_text("apple\ngrape\nmango\n")
    guesses.write_text("zzzzz\n")
    return str(answers), str(guesses)


def test_evenly_spaced_secrets():
    assert evenly_spaced_secrets(2315, 50)[:3] == [0, 46, 92]
    assert evenly_spaced_secrets(3, 3) == [0, 1, 2]
    with pytest.raises(ValueError):
        evenly_spaced_secrets(3, 4)


def test_cli_trials_average(word_files, capsys):
    answers, guesses = word_files
    main(["--answers", answers, "--guesses", guesses, "--opening", "zzzzz", "--trials", "3"])
    out = capsys.readouterr().out
    assert "grape: 2 guesses (zzzzz apple)" in out
    assert "greedy avg: 2.00" in out
    assert "over budget" not in out


def test_cli_flags_over_budget(word_files, capsys):
    answers, guesses = word_files
    main(["--answers", answers, "--guesses", guesses, "--opening", "zzzzz", "--secret", "1", "--budget", "1"])
    out = capsys.readouterr().out
    assert "grape: 2 guesses (zzzzz apple)  <-- over budget (1)" in out


def test_cli_requires_work(word_files):
    answers, guesses = word_files
    with pytest.raises(SystemExit):
        main(["--answers", answers, "--guesses", guesses])
