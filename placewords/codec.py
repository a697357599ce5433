"""Encoding of S2 cell ids as three or four memorable words and back.

An id is rendered as "s2pw://first.second.third.extra". The first three
words carry the cube face and the 42 central bits of the id, scrambled by
a linear feedback shift register so that nearby cells get unrelated words.
The optional fourth word refines the position further.
"""

from __future__ import annotations

from pathlib import Path

from placewords.words import DEFAULT_DIRECTORY, WordList

PREFIX = "s2pw://"

BITS_PER_WORD = 14
NUM_WORDS = 3
WORD_MASK = (1 << BITS_PER_WORD) - 1

EXCESS_BITS = 64 - 4 - BITS_PER_WORD * NUM_WORDS
EXCESS_MASK = (1 << EXCESS_BITS) - 1

LFSR_SIZE = BITS_PER_WORD * NUM_WORDS
LFSR_MASK = (1 << LFSR_SIZE) - 1
POLY = 0x2000000004C  # four-tap maximal LFSR

_ROUNDS = LFSR_SIZE
_MAX_INPUT = 256
_MASK64 = (1 << 64) - 1


class PlacewordsError(ValueError):
    """Raised when text cannot be decoded as placewords."""


def _step_forward(n: int) -> int:
    lsb = n & 1
    n >>= 1
    return n ^ POLY if lsb else n


def _step_reverse(n: int) -> int:
    if (n >> (LFSR_SIZE - 1)) & 1:
        return ((n ^ POLY) << 1) | 1
    return n << 1


def lfsr_forward(n: int) -> int:
    """Scramble a 42-bit value by running the LFSR forward 42 steps."""
    for _ in range(_ROUNDS):
        n = _step_forward(n)
    return n


def lfsr_reverse(n: int) -> int:
    """Undo lfsr_forward by running the LFSR backward 42 steps."""
    for _ in range(_ROUNDS):
        n = _step_reverse(n)
    return n


class Placewords:
    """Converts S2 cell ids to placewords text and back using a word list."""

    def __init__(self, words: WordList) -> None:
        self._words = words

    @classmethod
    def for_language(
        cls, language: str, directory: str | Path = DEFAULT_DIRECTORY
    ) -> Placewords:
        """Build a codec from the word list of a language."""
        return cls(WordList.load(language, directory))

    def encode(self, s2: int) -> str:
        """Return the four-word text for an S2 cell id."""
        value = (s2 & _MASK64) >> 1
        excess = (value & EXCESS_MASK) >> 4
        loci = lfsr_forward((value >> EXCESS_BITS) & LFSR_MASK)
        face = value >> 60

        ordinals = [
            (((loci >> (BITS_PER_WORD * shift)) & WORD_MASK) << 1) | ((face >> shift) & 1)
            for shift in (2, 1, 0)
        ]
        ordinals.append(excess)
        return PREFIX + ".".join(self._words.ordinal_to_word(o) for o in ordinals)

    def decode(self, text: str) -> int:
        """Return the S2 cell id named by placewords text.

        Three words are required; a fourth refines the position and is
        ignored if it is not a known word. Raises PlacewordsError otherwise.
        """
        if not text.startswith(PREFIX):
            raise PlacewordsError(f"missing {PREFIX!r} prefix in {text!r}")
        if len(text.encode("utf-8")) > _MAX_INPUT:
            raise PlacewordsError("placewords text is too long")

        tokens = [token for token in text[len(PREFIX):].split(".") if token]
        if len(tokens) < NUM_WORDS:
            raise PlacewordsError(f"expected at least {NUM_WORDS} words in {text!r}")

        ordinals = []
        for word in tokens[:NUM_WORDS]:
            try:
                ordinals.append(self._words.word_to_ordinal(word))
            except KeyError:
                raise PlacewordsError(f"unknown word {word!r}") from None

        excess = 0
        if len(tokens) > NUM_WORDS and tokens[NUM_WORDS] in self._words:
            excess = self._words.word_to_ordinal(tokens[NUM_WORDS])

        face = 0
        loci = 0
        for ordinal in ordinals:
            face = (face << 1) | (ordinal & 1)
            loci = (loci << BITS_PER_WORD) | (ordinal >> 1)
        loci = lfsr_reverse(loci)

        s2 = ((face << LFSR_SIZE) | loci) << EXCESS_BITS
        s2 |= excess << 4
        return ((s2 << 1) | 1) & _MASK64