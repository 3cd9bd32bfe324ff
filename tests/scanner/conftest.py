"""Shared helpers for scanner tests."""

from __future__ import annotations

import random

from urltally.scanner.counts import UrlMatch
from urltally.scanner.stream import StreamScanner

SEED = 42

# Fragments that build URL-dense noise: scheme pieces, domain and path
# characters, and terminators (including non-ASCII).
FRAGMENTS = [
    "http://", "https://", "http:/", "htt", "h", "p", "s", ":", "/", "//",
    "a", "B", "z9", ".", "-", ",", "+", "_", " ", "\n", "?", "#", "é",
]


def scan(text: str, flush: bool = True) -> StreamScanner:
    """Feed `text` to a fresh scanner, flushing unless told not to."""
    scanner = StreamScanner()
    scanner.feed(text)
    if flush:
        scanner.flush()
    return scanner


def collect_matches(text: str) -> list[UrlMatch]:
    """All matches of `text`, in completion order, including the flush."""
    scanner = StreamScanner()
    matches = scanner.feed(text)
    matches.extend(scanner.flush())
    return matches


def random_text(rng: random.Random, pieces: int = 200) -> str:
    return "".join(rng.choice(FRAGMENTS) for _ in range(pieces))


def generate_texts(count: int, seed: int = SEED) -> list[str]:
    rng = random.Random(seed)
    return [random_text(rng, rng.randint(1, 300)) for _ in range(count)]
