"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import sys

from wordsearch.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
