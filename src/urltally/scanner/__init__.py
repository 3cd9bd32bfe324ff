"""Incremental URL recognition.

Public API:
    URLAutomaton: one candidate URL, advanced a character at a time
    StreamScanner: runs an automaton per start offset over a stream
    UrlCounts: domain / path / total counters filled by the scanner
    scan_text, scan_chunks: one-shot helpers around StreamScanner
"""

from urltally.scanner.automaton import (
    State,
    TerminalStateError,
    URLAutomaton,
    is_domain_char,
    is_path_char,
)
from urltally.scanner.baseline import find_urls_regex, scan_text_regex
from urltally.scanner.counts import UrlCounts, UrlMatch
from urltally.scanner.stream import (
    FLUSH_SENTINEL,
    StreamScanner,
    scan_chunks,
    scan_text,
)
from urltally.scanner.types import Count, DomainName, UrlPath

__all__ = [
    "Count",
    "DomainName",
    "FLUSH_SENTINEL",
    "State",
    "StreamScanner",
    "TerminalStateError",
    "URLAutomaton",
    "UrlCounts",
    "UrlMatch",
    "UrlPath",
    "find_urls_regex",
    "is_domain_char",
    "is_path_char",
    "scan_chunks",
    "scan_text",
    "scan_text_regex",
]
