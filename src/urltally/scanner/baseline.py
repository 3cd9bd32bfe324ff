"""Regex reference scanner.

Finds the same URLs as StreamScanner, using one compiled regular
expression inside a zero-width lookahead so that a match is attempted
at every offset, overlapping matches included. It needs the whole text
in memory and reports matches in start order rather than completion
order, so it is only used as a baseline for consistency tests and
benchmarking.

The greedy character classes reproduce the automaton's longest-match
behaviour. A candidate that runs into the end of the text is accepted,
which matches the automaton after flush().
"""
from __future__ import annotations

import re

from urltally.scanner.counts import UrlCounts, UrlMatch

URL_PATTERN = re.compile(
    r"(?=https?://([A-Za-z0-9.\-]+)(/[A-Za-z0-9.,/+_]*)?)",
    re.ASCII,
)


def find_urls_regex(text: str) -> list[UrlMatch]:
    """Return every URL in `text`, ordered by start offset."""
    return [
        UrlMatch(domain=m.group(1).lower(), path=m.group(2) or "/")
        for m in URL_PATTERN.finditer(text)
    ]


def scan_text_regex(text: str) -> UrlCounts:
    counts = UrlCounts()
    for match in find_urls_regex(text):
        counts.record(match)
    return counts
