from collections import Counter

import pytest

from contestkit.strings import is_reversal, k_string


def test_reversal_worked_examples():
    assert is_reversal("code", "edoc") is True
    assert is_reversal("abb", "aba") is False


@pytest.mark.parametrize("word", ["a", "kayak", "translation", "ab"])
def test_reversal_of_reversed_word(word):
    assert is_reversal(word, word[::-1])


def test_reversal_is_symmetric():
    assert is_reversal("stressed", "desserts") == is_reversal("desserts", "stressed")


def test_k_string_worked_example():
    assert k_string(2, "aazz") == "azaz"


def test_k_string_impossible():
    assert k_string(3, "abcabcabz") is None


@pytest.mark.parametrize("k, text", [(1, "hello"), (3, "bcaacbbac"), (2, "zzyyxx")])
def test_k_string_is_rearrangement_of_repeated_block(k, text):
    result = k_string(k, text)
    assert Counter(result) == Counter(text)
    block = result[: len(text) // k]
    assert block * k == result


def test_k_one_gives_sorted_text():
    text = "banana"
    assert k_string(1, text) == "".join(sorted(text))


def test_k_string_rejects_zero():
    with pytest.raises(ValueError):
        k_string(0, "aa")