"""
bitset.py

LetterBitset helpers. Bit i set means letter i is in the set.

The whole alphabet has to fit in one 32-bit field; that is checked once
below rather than assumed in the arithmetic.
"""

from __future__ import annotations

from typing import List

from engine.codec import ALPHABET_SIZE, Word

LETTER_FIELD_BITS = 32

if ALPHABET_SIZE > LETTER_FIELD_BITS:
    raise RuntimeError(f"alphabet of {ALPHABET_SIZE} letters does not fit a {LETTER_FIELD_BITS}-bit field")

FULL = (1 << ALPHABET_SIZE) - 1


def letter_bit(letter: int) -> int:
    return 1 << letter


def has_letter(mask: int, letter: int) -> bool:
    return bool(mask & (1 << letter))


def word_mask(word: Word) -> int:
    """Membership mask of all letters appearing in `word`."""
    mask = 0
    for letter in word:
        mask |= 1 << letter
    return mask


def covers(mask: int, required: int) -> bool:
    """True iff every bit of `required` is also set in `mask`."""
    return (mask & required) == required


def letters_of(mask: int) -> List[int]:
    return [i for i in range(ALPHABET_SIZE) if mask & (1 << i)]
