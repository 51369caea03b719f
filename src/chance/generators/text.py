"""Pronounceable pseudo-text: syllables, words, sentences, paragraphs."""

from __future__ import annotations

import re

from .base import check_range
from .helpers import HelpersMixin

__all__ = ["TextMixin"]

CONSONANTS = "bcdfghjklmnprstvwz"
VOWELS = "aeiou"
_PUNCTUATION = re.compile(r"[.?;!:]")


class TextMixin(HelpersMixin):
    def syllable(self, length: int | None = None, capitalize: bool = False) -> str:
        """Alternate consonants and vowels, starting from any letter."""

        size = length or self.natural(min=2, max=3)
        text = ""
        current = ""
        for i in range(size):
            if i == 0:
                current = self.character(pool=CONSONANTS + VOWELS)
            elif current not in CONSONANTS:
                current = self.character(pool=CONSONANTS)
            else:
                current = self.character(pool=VOWELS)
            text += current
        return self.capitalize(text) if capitalize else text

    def word(
        self,
        syllables: int | None = None,
        length: int | None = None,
        capitalize: bool = False,
    ) -> str:
        check_range(
            bool(syllables) and bool(length),
            "Cannot specify both syllables AND length.",
        )
        count = syllables or self.natural(min=1, max=3)
        if length:
            text = ""
            while len(text) < length:
                text += self.syllable()
            text = text[:length]
        else:
            text = "".join(self.syllable() for _ in range(count))
        return self.capitalize(text) if capitalize else text

    def sentence(self, words: int | None = None, punctuation: str | bool | None = None) -> str:
        """Return 12..18 capitalised words ending in ``.`` unless told otherwise.

        ``punctuation=False`` omits the terminator; anything other than one of
        ``.?;!:`` falls back to a full stop.
        """

        count = words or self.natural(min=12, max=18)
        text = self.capitalize(" ".join(self.n(self.word, count)))
        if punctuation is not False and not (
            isinstance(punctuation, str) and _PUNCTUATION.fullmatch(punctuation)
        ):
            punctuation = "."
        if punctuation:
            text += str(punctuation)
        return text

    def paragraph(self, sentences: int | None = None) -> str:
        count = sentences or self.natural(min=3, max=7)
        return " ".join(self.n(self.sentence, count))
