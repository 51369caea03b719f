from __future__ import annotations

import pytest

from chance import Chance, ChanceRangeError

VOWELS = set("aeiou")


@pytest.fixture()
def chance() -> Chance:
    return Chance(314)


def test_syllable_alternates(chance: Chance) -> None:
    for _ in range(50):
        syllable = chance.syllable(length=5)
        assert len(syllable) == 5
        kinds = [ch in VOWELS for ch in syllable]
        assert all(a != b for a, b in zip(kinds, kinds[1:]))


def test_word_length(chance: Chance) -> None:
    assert len(chance.word(length=9)) == 9
    assert 2 <= len(chance.word(syllables=1)) <= 3
    assert chance.word(capitalize=True)[0].isupper()


def test_word_rejects_syllables_and_length(chance: Chance) -> None:
    with pytest.raises(ChanceRangeError):
        chance.word(syllables=2, length=4)


def test_sentence(chance: Chance) -> None:
    text = chance.sentence(words=5)
    assert text.endswith(".")
    assert len(text.split(" ")) == 5
    assert text[0].isupper()
    assert chance.sentence(punctuation="?").endswith("?")
    assert chance.sentence(punctuation="!!").endswith(".")
    assert chance.sentence(words=3, punctuation=False)[-1].isalpha()


def test_default_sentence_length(chance: Chance) -> None:
    assert 12 <= len(chance.sentence().split(" ")) <= 18


def test_paragraph(chance: Chance) -> None:
    assert chance.paragraph(sentences=4).count(".") == 4
    assert 3 <= chance.paragraph().count(".") <= 7
