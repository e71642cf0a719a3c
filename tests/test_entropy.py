import pytest

from talisman.base64_detector import BASE64_CHARS
from talisman.entropy import entropy_candidates, shannon_entropy

SAMPLE = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"


def test_candidates_found_for_given_set():
    assert len(entropy_candidates(SAMPLE, 20, BASE64_CHARS)) == 1


def test_candidates_empty_for_shorter_words():
    assert entropy_candidates("abc", 4, BASE64_CHARS) == []


def test_entropy_of_secret_higher_than_four():
    assert shannon_entropy(SAMPLE, BASE64_CHARS) > 4


def test_entropy_of_empty_string_is_zero():
    assert shannon_entropy("", BASE64_CHARS) == 0.0


def test_entropy_of_repeated_character_is_zero():
    assert shannon_entropy("aaaaaaaa", BASE64_CHARS) == 0.0


def test_entropy_of_two_equal_characters_is_one_bit():
    assert shannon_entropy("abab", BASE64_CHARS) == pytest.approx(1.0)


def test_candidate_must_be_strictly_longer_than_minimum():
    assert entropy_candidates("a" * 20, 20, BASE64_CHARS) == []
    assert entropy_candidates("a" * 21, 20, BASE64_CHARS) == ["a" * 21]


def test_candidates_are_split_on_foreign_characters():
    first = "A" * 22
    second = "b" * 23
    word = f"{first}!short!{second}"
    assert entropy_candidates(word, 20, BASE64_CHARS) == [first, second]


def test_candidates_contain_only_superset_characters():
    word = "xyz" * 10 + "###" + "abc" * 10
    for candidate in entropy_candidates(word, 5, set("abcxyz")):
        assert set(candidate) <= set("abcxyz")