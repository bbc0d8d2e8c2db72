from __future__ import annotations

from typing import List

from engine.codec import encode
from engine.errors import WordDecodeError


def load_word_file(path: str, *, skip_invalid: bool = False) -> List[str]:
    """
    Load a flat word list (one five-letter token per line).

    Blank lines are ignored and tokens are stripped and lowercased.
    A malformed line raises WordDecodeError carrying its line number,
    unless `skip_invalid` is set, in which case it is dropped.
    """
    words: List[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            token = raw.strip().lower()
            if not token:
                continue
            try:
                encode(token)
            except WordDecodeError as e:
                if skip_invalid:
                    continue
                raise WordDecodeError(token, line=lineno, reason=str(e)) from None
            words.append(token)
    return words


def load_answer_vocab(csv_path: str):
    """
    Load the word_list.csv layout into a WordVocab.
    Rows where 'day' is not null are answers; the remaining rows are
    accepted as guesses only.
    """
    from engine.vocab import WordVocab

    return WordVocab.from_csv(csv_path, column="word", day_column="day")
