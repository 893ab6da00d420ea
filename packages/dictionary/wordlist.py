"""
Word-list dictionary: a word is real iff it appears in a given text file.

Handy offline and in tests, where the answer for every word must be known
in advance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import load_words
from .base import BaseDictionary, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list (file membership)"

    def __init__(self, path: Path | str | None = None, *, words: Iterable[str] | None = None):
        if path is None and words is None:
            raise ValueError("wordlist dictionary needs a path or an iterable of words")
        self.words: Set[str] = set(load_words(path)) if path is not None else set()
        if words is not None:
            self.words.update(w.strip().lower() for w in words if w.strip())

    def is_real_word(self, word: str) -> bool:
        return word.strip().lower() in self.words
