"""Word lists mapping ordinals to words and back."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

ORDINAL_COUNT = 32768
DEFAULT_DIRECTORY = "words"

_CONTENT = re.compile(r"[^\x00-\x1f#]*")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class WordListError(ValueError):
    """Raised when a word list is malformed or cannot be read."""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_word_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (ordinal, word) pairs from lines of the form "ORDINAL word,word,...".

    A line ends at its first control character or '#'. Lines without a
    space carry no words.
    """
    for line in lines:
        content = _CONTENT.match(line).group()
        head, sep, rest = content.partition(" ")
        if not sep:
            continue
        ordinal = _leading_int(head)
        for word in rest.split(","):
            if word:
                yield ordinal, word


class WordList:
    """A complete, bidirectional mapping between ordinals and words.

    Several words may share one ordinal; the last one given is the one
    used when turning that ordinal into a word.
    """

    def __init__(self, entries: Iterable[tuple[int, str]]) -> None:
        self._by_word: dict[str, int] = {}
        self._by_ordinal: dict[int, str] = {}
        for ordinal, word in entries:
            if not 0 <= ordinal < ORDINAL_COUNT:
                raise WordListError(f"bad ordinal {ordinal} for word {word!r}")
            if word in self._by_word:
                raise WordListError(f"duplicate word {word!r}")
            self._by_word[word] = ordinal
            self._by_ordinal[ordinal] = word

        missing = next(
            (ordinal for ordinal in range(ORDINAL_COUNT) if ordinal not in self._by_ordinal),
            None,
        )
        if missing is not None:
            raise WordListError(f"missing ordinal {missing}")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> WordList:
        """Build a word list from the lines of a word file."""
        return cls(parse_word_lines(lines))

    @classmethod
    def load(cls, language: str, directory: str | Path = DEFAULT_DIRECTORY) -> WordList:
        """Load the word list for a language from "<directory>/<language>.txt"."""
        path = Path(directory) / f"{language}.txt"
        try:
            handle = path.open(encoding="utf-8")
        except OSError as exc:
            raise WordListError(f"unable to open {path} for reading") from exc
        with handle:
            return cls.from_lines(handle)

    def word_to_ordinal(self, word: str) -> int:
        """Return the ordinal of a word; raise KeyError if it is not listed."""
        try:
            return self._by_word[word]
        except KeyError:
            raise KeyError(word) from None

    def ordinal_to_word(self, ordinal: int) -> str:
        """Return the word for an ordinal; raise IndexError if out of range."""
        if not 0 <= ordinal < ORDINAL_COUNT:
            raise IndexError(f"bad ordinal {ordinal}")
        return self._by_ordinal[ordinal]

    def __contains__(self, word: object) -> bool:
        return word in self._by_word

    def __len__(self) -> int:
        """Return the number of distinct words."""
        return len(self._by_word)