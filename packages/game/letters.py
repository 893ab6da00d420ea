"""
Letter helpers for a Word Scramble round.

Two primitives every other part of the game leans on:
  - normalize:               canonical form of raw player input
  - uses_root_word_letters:  can `word` be spelled from the root word's letters?

The letter check is a MULTISET test, not a set test: each letter of the root
word can be used at most once per guess.

Examples (root "silkworm"):
  uses_root_word_letters("skim", "silkworm")  -> True
  uses_root_word_letters("wormy", "silkworm") -> False  (no 'y')
  uses_root_word_letters("mill", "silkworm")  -> False  (only one 'l')
"""

from __future__ import annotations

from collections import Counter


def normalize(raw: str) -> str:
    """
    Lowercase and strip surrounding whitespace (spaces, tabs, newlines).

    Idempotent: normalize(normalize(s)) == normalize(s).
    """
    return raw.lower().strip()


def uses_root_word_letters(word: str, root_word: str) -> bool:
    """
    Return True iff the letters of `word` form a sub-multiset of the letters
    of `root_word`.

    Works like a pool of tiles: every letter of the guess consumes one
    matching tile from the root word; running out means the guess is not
    buildable.
    """
    remaining = Counter(root_word.lower())
    for ch in word:
        if remaining[ch] > 0:
            remaining[ch] -= 1  # consume one instance
        else:
            return False
    return True
