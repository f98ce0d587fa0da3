"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from ..core.models import PuzzleResult


def format_grid(rows: Sequence[Sequence[str]]) -> str:
    return "\n".join(" ".join(row) for row in rows)


def format_report(result: PuzzleResult, *, show_words: bool = False) -> str:
    lines: List[str] = [
        f"Inserted: {result.placed_count}",
        f"Remaining: {result.not_placed_count}",
        "",
    ]
    if result.grid:
        lines.append(format_grid(result.grid))
    if show_words and result.words:
        lines.append("")
        lines.append("Words: " + " ".join(result.words))
    return "\n".join(lines)


def print_puzzle_report(result: PuzzleResult, *, show_words: bool = False, stream=None) -> None:
    """Print the placement counts followed by the grid."""

    stream = stream or sys.stdout
    print(format_report(result, show_words=show_words), file=stream)
