"""
Mutable data for one round of Word Scramble.

GameState is pure bookkeeping: it never validates. The validator decides,
the session commits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class GameState:
    root_word: str = ""
    used_words: List[str] = field(default_factory=list)  # most-recent-first
    score: int = 0

    def reset(self, new_root_word: str) -> None:
        """Start a fresh round on `new_root_word`."""
        self.root_word = new_root_word.strip().lower()
        self.used_words = []
        self.score = 0

    def commit_guess(self, normalized_word: str) -> None:
        """
        Record an accepted guess: prepend it and add its letter count to the
        score. Uniqueness is the validator's job, not re-checked here.
        """
        self.used_words.insert(0, normalized_word)
        self.score += len(normalized_word)

    def letter_counts(self) -> List[Tuple[str, int]]:
        """(word, letters) rows in display order."""
        return [(w, len(w)) for w in self.used_words]
