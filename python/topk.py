#!/usr/bin/env python3
"""
Select the K highest rated of N elements.

Two solutions:
1. topk_by_sort - sort everything, O(n log n)
2. topk_by_heap - keep the best K seen so far in a min-heap, O(n log k)
"""

from __future__ import annotations

import heapq
import logging
import random
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

import config

logger = logging.getLogger(__name__)

MAX_RATING = 100


@dataclass(frozen=True)
class Element:
    """A uniquely identified element with a rating."""

    id: int
    rating: int

    def __str__(self) -> str:
        return f"{{ id : {self.id}, rating : {self.rating} }}"


TopK = Callable[[Sequence[Element], int], list[Element]]


def generate_elements(n: int, rng: random.Random | None = None) -> list[Element]:
    """n elements with ids 0..n-1 and random ratings in 0..MAX_RATING."""
    if rng is None:
        rng = random.Random()
    return [Element(i, rng.randint(0, MAX_RATING)) for i in range(n)]


def topk_by_sort(elements: Sequence[Element], k: int) -> list[Element]:
    """Top min(k, n) elements in descending rating order, by sorting all n."""
    return sorted(elements, key=lambda e: e.rating, reverse=True)[:k]


def topk_by_heap(elements: Sequence[Element], k: int) -> list[Element]:
    """Top min(k, n) elements in descending rating order, via a bounded min-heap."""
    if k <= 0:
        return []

    # Heap entries are (rating, id, element); the root is the weakest of the best k
    heap: list[tuple[int, int, Element]] = []
    for e in elements:
        entry = (e.rating, e.id, e)
        if len(heap) < k:
            heapq.heappush(heap, entry)
        elif heap[0][0] < e.rating:
            heapq.heapreplace(heap, entry)

    logger.debug("topk_by_heap: kept %d of %d elements", len(heap), len(elements))
    return [e for _, _, e in sorted(heap, key=lambda entry: entry[0], reverse=True)]


USAGE = (
    "Usage: {prog} [N [K [naive]]]\n"
    "    N - the number of elements (generated)\n"
    "    K - the number of top rated elements\n"
    "    naive - use the naive O(N log N) solution over the O(N log K) solution\n"
)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "topk.py"

    try:
        n = int(argv[1]) if len(argv) > 1 else config.TOPK_DEFAULT_N
        k = int(argv[2]) if len(argv) > 2 else config.TOPK_DEFAULT_K
    except ValueError:
        n = k = 0
    naive = len(argv) > 3 and argv[3] == "naive"
    if n <= 0 or k <= 0 or (len(argv) > 3 and not naive) or len(argv) > 4:
        print(USAGE.format(prog=prog), file=sys.stderr, end="")
        return 1

    solution: TopK = topk_by_sort if naive else topk_by_heap
    for e in solution(generate_elements(n), k):
        print(e)
    return 0


def run() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    sys.exit(main())


if __name__ == "__main__":
    run()
