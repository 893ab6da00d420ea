"""
Root-word selection.

Picks the word a round is played on, uniformly at random from the start-word
list. Loading the list (and failing loudly when it is missing) is the
loader's job; see packages.datasets.io.load_start_words.
"""

from __future__ import annotations

import random
from typing import Sequence

# Used only when the list loaded fine but held no words.
FALLBACK_ROOT_WORD = "silkworm"


def select_root_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """
    Choose one entry uniformly at random and trim it.

    Args:
      words : candidate root words (already loaded)
      rng   : optional seeded RNG for reproducible picks

    Returns:
      The chosen word, or FALLBACK_ROOT_WORD if `words` is empty.
    """
    if not words:
        return FALLBACK_ROOT_WORD
    rng = rng or random.Random()
    return words[rng.randrange(len(words))].strip()
