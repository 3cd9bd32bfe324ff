"""urltally: count URL domains and paths in arbitrary text.

Re-exports the scanning API for convenient access:
    from urltally import StreamScanner, scan_text, rank_counts
"""
from urltally.reporting import format_report, rank_counts
from urltally.scanner import (
    StreamScanner,
    TerminalStateError,
    URLAutomaton,
    UrlCounts,
    UrlMatch,
    scan_chunks,
    scan_text,
)

__version__ = "0.1.0"

__all__ = [
    "StreamScanner",
    "TerminalStateError",
    "URLAutomaton",
    "UrlCounts",
    "UrlMatch",
    "format_report",
    "rank_counts",
    "scan_chunks",
    "scan_text",
]
