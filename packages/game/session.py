# packages/game/session.py
from __future__ import annotations

import random
from typing import List, Sequence

from packages.dictionary.base import BaseDictionary
from .roots import select_root_word
from .state import GameState
from .validation import Accepted, ValidationOutcome, validate


class GameSession:
    """
    One player's session: a word list, a dictionary and the current round.

    The shell (CLI, notebook, anything) only talks to this object:
      - restart()     picks a new root word and wipes the round
      - submit(raw)   validates a guess and commits it if accepted

    The first round starts on construction.
    """

    def __init__(self, words: Sequence[str], dictionary: BaseDictionary, *,
                 seed: int | None = None):
        self.words = list(words)
        self.dictionary = dictionary
        self.rng = random.Random(seed)
        self.state = GameState()
        self.restart()

    def restart(self) -> str:
        """Pick a new root word and reset used words and score. Returns the root word."""
        self.state.reset(select_root_word(self.words, self.rng))
        return self.state.root_word

    def submit(self, raw: str) -> ValidationOutcome:
        outcome = validate(raw, self.state, self.dictionary)
        if isinstance(outcome, Accepted):
            self.state.commit_guess(outcome.word)
        return outcome

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def used_words(self) -> List[str]:
        return list(self.state.used_words)

    @property
    def score(self) -> int:
        return self.state.score
