"""Case normalization and placement-order scrambling."""

from __future__ import annotations

import random
from typing import List, Sequence

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def capitalize_words(words: Sequence[str]) -> List[str]:
    return [word.upper() for word in words]


def scramble_words(words: Sequence[str], rng: random.Random) -> List[str]:
    """Reverse a random handful of words, then sort descending.

    Between 1 and ``len(words)`` reversal rounds run; each picks one index at
    random, so a word may be reversed twice and end up unchanged. Only the
    placement order and reading direction change, never the letters.
    """

    scrambled = list(words)
    if not scrambled:
        return scrambled

    count = len(scrambled)
    nrev = rng.randint(1, count)
    for _ in range(nrev):
        idx = rng.randint(1, count) - 1
        if idx < count:
            scrambled[idx] = scrambled[idx][::-1]
    scrambled.sort(reverse=True)
    LOGGER.debug("Scrambled %s words with %s reversal rounds", count, nrev)
    return scrambled
