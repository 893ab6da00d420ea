"""
wordfreq-backed dictionary.

Strategy:
  - A word is "real" iff wordfreq knows it in English AND it is common
    enough, i.e. its Zipf frequency is above `min_zipf`.
  - Zipf is log10 of occurrences per billion words; 0.0 means "never seen".

Notes:
  - wordfreq is built from web text, so nearly every short letter jumble
    (acronyms, handles, typos) has SOME frequency. A threshold of 0.0 lets
    those through; DEFAULT_MIN_ZIPF keeps everyday words like "skim" and
    drops jumbles like "iwrm" or "mlrs".
  - Lower it to accept rarer words, raise it for an easier dictionary.
"""

from __future__ import annotations

from wordfreq import zipf_frequency

from .base import BaseDictionary, register

# Roughly "a few occurrences per million words".
DEFAULT_MIN_ZIPF = 2.75


@register
class WordfreqDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq (Zipf frequency)"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        if min_zipf < 0:
            raise ValueError(f"min_zipf must be >= 0; got {min_zipf}")
        self.min_zipf = float(min_zipf)

    def is_real_word(self, word: str) -> bool:
        return zipf_frequency(word, self.language) > self.min_zipf
