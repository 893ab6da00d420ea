"""
Guess validation for Word Scramble.

This module answers the question: "Is this guess acceptable right now?"
A guess is accepted iff, after normalization, it:
  1) is longer than 3 letters
  2) is not the root word itself
  3) has not been used already this round
  4) only uses letters available in the root word (respecting multiplicity)
  5) is a real word according to the dictionary

Checks run in exactly that order and stop at the first failure, so the
player always sees the earliest rule they broke. A blank submission is not
an error at all: it yields `Empty` and the shell simply ignores it.

`validate` never touches the GameState. Committing an accepted word is the
caller's job (see GameSession.submit).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from .letters import normalize, uses_root_word_letters
from .state import GameState

# Guesses must be strictly longer than this.
MIN_EXCLUSIVE_LENGTH = 3


class ErrorKind(Enum):
    TOO_SHORT = "too_short"
    ROOT_WORD = "root_word"
    ALREADY_USED = "already_used"
    LETTERS_NOT_PERMITTED = "letters_not_permitted"
    NOT_A_WORD = "not_a_word"


# (title, message) shown to the player for each failure.
ERROR_TEXT: Dict[ErrorKind, Tuple[str, str]] = {
    ErrorKind.TOO_SHORT: ("Not long enough", "Please use > 3 letter words"),
    ErrorKind.ROOT_WORD: ("Not allowed", "Using the original word is not allowed"),
    ErrorKind.ALREADY_USED: ("Word used already", "Be more original"),
    ErrorKind.LETTERS_NOT_PERMITTED: ("Letters not permitted", "Only use letters from the above word"),
    ErrorKind.NOT_A_WORD: ("Not a word", "Please use only real words"),
}


@dataclass(frozen=True)
class Accepted:
    word: str


@dataclass(frozen=True)
class Rejected:
    kind: ErrorKind
    title: str
    message: str


@dataclass(frozen=True)
class Empty:
    """Blank or whitespace-only submission; a no-op, not an error."""


ValidationOutcome = Union[Accepted, Rejected, Empty]


def reject(kind: ErrorKind) -> Rejected:
    """Build the Rejected outcome for `kind` with its fixed title/message."""
    title, message = ERROR_TEXT[kind]
    return Rejected(kind=kind, title=title, message=message)


def is_original(word: str, state: GameState) -> bool:
    return word not in state.used_words


def validate(raw: str, state: GameState, dictionary) -> ValidationOutcome:
    """
    Run the ordered check pipeline on `raw` against the current round.

    Args:
      raw        : text exactly as the player typed it
      state      : current round (read-only here)
      dictionary : object exposing is_real_word(word) -> bool

    Returns:
      Accepted(word) | Rejected(kind, title, message) | Empty()
    """
    answer = normalize(raw)

    if not answer:
        return Empty()

    if len(answer) <= MIN_EXCLUSIVE_LENGTH:
        return reject(ErrorKind.TOO_SHORT)

    if answer == state.root_word:
        return reject(ErrorKind.ROOT_WORD)

    if not is_original(answer, state):
        return reject(ErrorKind.ALREADY_USED)

    if not uses_root_word_letters(answer, state.root_word):
        return reject(ErrorKind.LETTERS_NOT_PERMITTED)

    if not dictionary.is_real_word(answer):
        return reject(ErrorKind.NOT_A_WORD)

    return Accepted(answer)
