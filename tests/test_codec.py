import pytest

from engine.bitset import FULL, covers, has_letter, letters_of, word_mask
from engine.codec import as_word, decode, encode
from engine.errors import WordDecodeError


def test_encode_decode():
    assert encode("roate") == (17, 14, 0, 19, 4)
    assert decode((17, 14, 0, 19, 4)) == "roate"
    assert encode("apple") == encode("apple")
    assert encode("apple") != encode("appel")


@pytest.mark.parametrize("token", ["abc", "abcdef", "ABCDE", "ab1de", "ab de", "", "cafés"])
def test_encode_rejects_malformed(token):
    with pytest.raises(WordDecodeError):
        encode(token)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        encode(12345)


def test_as_word_accepts_both_forms():
    assert as_word("apple") == encode("apple")
    assert as_word([0, 1, 2, 3, 4]) == (0, 1, 2, 3, 4)
    with pytest.raises(ValueError):
        as_word([0, 1, 2, 3, 26])


def test_word_mask_membership():
    mask = word_mask(encode("llama"))
    assert letters_of(mask) == [0, 11, 12]
    assert has_letter(mask, 0)
    assert not has_letter(mask, 1)
    assert covers(FULL, mask)
    assert not covers(mask, word_mask(encode("lemon")))
