"""Candidate word extraction from plain text files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from ..core.exceptions import ConfigurationError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

THRESHOLD_RE = re.compile(r"-?([0-9]+)")


@dataclass
class WordCollection:
    """Words gathered from a set of files plus the files that were skipped."""

    words: List[str] = field(default_factory=list)
    skipped_files: List[Path] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_files)


def parse_min_length(text: str) -> int:
    """Parse a ``-N`` (or bare ``N``) shortest-word-length argument."""

    match = THRESHOLD_RE.fullmatch(text.strip())
    if match is None:
        raise ConfigurationError("Expected an integer")
    return int(match.group(1))


def extract_words(text: str, min_length: int) -> List[str]:
    """Return every maximal run of ASCII letters at least ``min_length`` long."""

    pattern = re.compile(r"[A-Za-z]{%d,}" % max(min_length, 1))
    return pattern.findall(text)


def collect_words(paths: Iterable[Path | str], min_length: int) -> WordCollection:
    collection = WordCollection()
    for raw_path in paths:
        path = Path(raw_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("Skipping unreadable file %s: %s", path, exc)
            collection.skipped_files.append(path)
            continue
        found = extract_words(text, min_length)
        LOGGER.debug("Extracted %s words from %s", len(found), path)
        collection.words.extend(found)
    if collection.skipped_files:
        LOGGER.warning("Skipped %s unreadable file(s)", collection.skipped_count)
    return collection
