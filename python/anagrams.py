#!/usr/bin/env python3
"""
Find anagrams in a list of words.

Two words are anagrams when sorting their letters gives the same string.
Words are read from the command line, or from stdin if none are given.
"""

from __future__ import annotations

import logging
import sys
from collections import Counter
from typing import Iterable, TextIO

import config

logger = logging.getLogger(__name__)


def canonicalize(word: str) -> str:
    """Canonical form of a word: its letters in sorted order."""
    return "".join(sorted(word))


def find_anagrams(words: Iterable[str]) -> list[str]:
    """
    Find the words that are anagrams of another word in the list.

    Args:
        words: Words without duplicates

    Returns:
        The anagram words, in their original order
    """
    words = list(words)
    counts = Counter(canonicalize(w) for w in words)
    logger.debug("find_anagrams: %d words, %d canonical forms", len(words), len(counts))
    return [w for w in words if counts[canonicalize(w)] > 1]


def read_words(stream: TextIO) -> list[str]:
    """Whitespace-separated words from a text stream."""
    return stream.read().split()


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    words = argv[1:] if len(argv) > 1 else read_words(sys.stdin)
    print(" ".join(find_anagrams(words)))
    return 0


def run() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    sys.exit(main())


if __name__ == "__main__":
    run()
