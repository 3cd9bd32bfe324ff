"""Stream scanner: finds every URL occurrence at every offset.

A URL may start at any character of the stream, not just after
whitespace, so the scanner runs one URLAutomaton per possible start
offset. For each incoming character it:

    1. Spawns a fresh automaton (the character may begin a URL).
    2. Feeds the character to every live automaton, oldest first.
    3. Records automata that reached SUCCESS and drops them.
    4. Drops automata that reached ERROR.
    5. Keeps the rest, in spawn order, for the next character.

The live set is rebuilt in one forward pass per character, appending
survivors to a fresh list. That is amortized O(1) per automaton per
character, with no mid-list deletions.

Live set bound: the scheme "http(s)://" has no proper prefix that is
also a suffix of itself, so at most one automaton can sit in a prefix
state. ":" belongs to neither the domain nor the path class, so a
second URL beginning inside a domain or path terminates the first one
when its ":" arrives. After any step the live set therefore holds at
most two automata, whatever the input. `peak_live` records the
observed maximum.

When the input ends, call flush(). It feeds FLUSH_SENTINEL, which
resolves automata still reading a domain or path into matches and
discards automata stuck in the prefix.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from urltally.scanner.automaton import URLAutomaton
from urltally.scanner.counts import UrlCounts, UrlMatch

log = logging.getLogger(__name__)

FLUSH_SENTINEL = "\n"


class StreamScanner:
    """Incremental multi-offset URL scanner.

    Args:
        counts: aggregate to update (default: a fresh UrlCounts)
        on_match: called once per recognized URL, in completion order
    """

    def __init__(
        self,
        counts: UrlCounts | None = None,
        on_match: Callable[[UrlMatch], None] | None = None,
    ) -> None:
        self._counts = counts if counts is not None else UrlCounts()
        self._on_match = on_match
        self._live: list[URLAutomaton] = []
        self._peak_live = 0
        self._chars_consumed = 0

    @property
    def counts(self) -> UrlCounts:
        return self._counts

    @property
    def live_count(self) -> int:
        return len(self._live)

    @property
    def peak_live(self) -> int:
        """Largest live set observed at the end of any step."""
        return self._peak_live

    @property
    def chars_consumed(self) -> int:
        return self._chars_consumed

    def consume(self, ch: str) -> list[UrlMatch]:
        """Process one character. Returns the URLs completed by it.

        on_match runs only after the live set has been reaped, so an
        exception raised by the callback leaves the scanner usable.
        """
        if len(ch) != 1:
            raise ValueError(f"consume() expects a single character, got {ch!r}")
        self._live.append(URLAutomaton())

        completed: list[UrlMatch] = []
        survivors: list[URLAutomaton] = []
        for fsm in self._live:
            fsm.consume(ch)
            if fsm.is_success():
                match = fsm.take_match()
                self._counts.record(match)
                completed.append(match)
            elif not fsm.is_error():
                survivors.append(fsm)
        self._live = survivors

        self._chars_consumed += 1
        if len(survivors) > self._peak_live:
            self._peak_live = len(survivors)

        if self._on_match is not None:
            for match in completed:
                self._on_match(match)
        return completed

    def feed(self, text: str) -> list[UrlMatch]:
        """Process every character of `text`."""
        completed: list[UrlMatch] = []
        for ch in text:
            completed.extend(self.consume(ch))
        return completed

    def flush(self) -> list[UrlMatch]:
        """Resolve pending candidates at end of input.

        Candidates reading a domain or path become matches; candidates
        still inside "http(s)://" are dropped without being counted.
        """
        pending = len(self._live)
        completed = self.consume(FLUSH_SENTINEL)
        # The sentinel is not part of the input.
        self._chars_consumed -= 1
        dropped = pending - len(completed)
        log.debug(
            "flush: %d match(es) completed, %d incomplete candidate(s) dropped",
            len(completed), dropped,
        )
        return completed


def scan_text(text: str) -> UrlCounts:
    """Scan a whole string with a fresh scanner and return its counts."""
    scanner = StreamScanner()
    scanner.feed(text)
    scanner.flush()
    return scanner.counts


def scan_chunks(chunks: Iterable[str]) -> UrlCounts:
    """Scan a sequence of text chunks as one continuous stream.

    URLs spanning chunk boundaries are found, since automata persist
    across feed() calls.
    """
    scanner = StreamScanner()
    for chunk in chunks:
        scanner.feed(chunk)
    scanner.flush()
    log.debug(
        "scanned %d chars, %d url(s), peak live set %d",
        scanner.chars_consumed, scanner.counts.total, scanner.peak_live,
    )
    return scanner.counts
