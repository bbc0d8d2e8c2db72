import pytest

from engine.codec import encode_many
from engine.vocab import WordVocab

ANSWERS = ["apple", "grape", "mango"]
EXTRAS = ["zzzzz"]


@pytest.fixture
def small_vocab():
    return WordVocab(list(ANSWERS), EXTRAS)


@pytest.fixture
def small_entries():
    return encode_many(ANSWERS + EXTRAS)
