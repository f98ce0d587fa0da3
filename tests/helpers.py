"""Shared test helpers."""

from __future__ import annotations

import random
from typing import Iterable, List, Sequence

from wordsearch.core.constants import COMPASS, DIRECTION_STEPS


class ScriptedRandom(random.Random):
    """Random source whose ``randrange`` replays a fixed script."""

    def __init__(self, draws: Iterable[int]) -> None:
        super().__init__(0)
        self.draws: List[int] = list(draws)

    def randrange(self, *args, **kwargs) -> int:  # type: ignore[override]
        return self.draws.pop(0)


def word_in_grid(rows: Sequence[Sequence[str]], word: str) -> bool:
    size = len(rows)
    for row in range(size):
        for col in range(size):
            for direction in COMPASS:
                dr, dc = DIRECTION_STEPS[direction]
                r, c = row, col
                matched = 0
                for letter in word:
                    if not (0 <= r < size and 0 <= c < size) or rows[r][c] != letter:
                        break
                    matched += 1
                    r, c = r + dr, c + dc
                if matched == len(word):
                    return True
    return False
