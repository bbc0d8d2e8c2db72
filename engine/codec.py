"""
codec.py

Maps five-letter lowercase tokens to Words (tuples of letter codes 0..25)
and back. Tuples give value equality and hashing for free.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from engine.errors import WordDecodeError

WORD_LENGTH = 5
ALPHABET_SIZE = 26
UNKNOWN_LETTER = -1

Word = Tuple[int, ...]


def _li(c: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(c) - 97


def encode(token: str) -> Word:
    """
    Encode a token into a Word.

    Raises
    ------
    WordDecodeError
        If `token` is not a string of exactly five ASCII lowercase letters.
    """
    if not isinstance(token, str):
        raise WordDecodeError(token, reason="not a string")
    if len(token) != WORD_LENGTH:
        raise WordDecodeError(token, reason=f"expected {WORD_LENGTH} letters, got {len(token)}")
    for ch in token:
        if not ("a" <= ch <= "z"):
            raise WordDecodeError(token, reason=f"invalid character {ch!r}")
    return tuple(_li(ch) for ch in token)


def decode(word: Word) -> str:
    """Render a Word back to its lowercase token."""
    if len(word) != WORD_LENGTH:
        raise ValueError(f"word must have {WORD_LENGTH} letters, got {len(word)}")
    out = []
    for letter in word:
        if not 0 <= letter < ALPHABET_SIZE:
            raise ValueError(f"letter code out of range: {letter}")
        out.append(chr(letter + 97))
    return "".join(out)


def encode_many(tokens: Iterable[str]) -> List[Word]:
    return [encode(t) for t in tokens]


def as_word(word_or_token) -> Word:
    """Accept either an already-encoded Word or a token."""
    if isinstance(word_or_token, str):
        return encode(word_or_token)
    word = tuple(word_or_token)
    decode(word)  # range check only
    return word
