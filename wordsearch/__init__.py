"""Word search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleEngine``: sizes, fills and reports one grid.
- ``wordsearch.data.word_source.collect_words``: extracts candidate words from files.
"""

from .engine.generator import EngineConfig, PuzzleEngine
from .data.word_source import WordCollection, collect_words

__all__ = [
    "EngineConfig",
    "PuzzleEngine",
    "WordCollection",
    "collect_words",
]

__version__ = "0.1.0"
