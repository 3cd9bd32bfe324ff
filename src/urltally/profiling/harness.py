"""Profiling harness for the URL scanner.

Generates a synthetic workload, scans it with StreamScanner (optionally
under cProfile), and reports throughput together with the peak size of
the live automaton set. The regex baseline can be timed on the same
text for comparison.

The harness checks its own output: a scan whose counts differ from the
generator's expected counts is a bug, and the run is marked as such
rather than silently reported.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from urltally.profiling.load_generator import LoadGenerator, pathological_text
from urltally.scanner.baseline import scan_text_regex
from urltally.scanner.stream import StreamScanner

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanResult:
    """Timing results from a single scan run."""
    label: str
    chars_scanned: int
    urls_found: int
    distinct_domains: int
    distinct_paths: int
    total_time_ms: float
    chars_per_sec: float
    peak_live: int | None
    counts_match: bool
    cprofile_stats: str | None = None


def _scan_with_automaton(text: str) -> StreamScanner:
    scanner = StreamScanner()
    scanner.feed(text)
    scanner.flush()
    return scanner


def run_scan(
    total_urls: int = 5_000,
    num_domains: int = 50,
    noise_words: int = 8,
    seed: int = 42,
    profile: bool = False,
) -> ScanResult:
    """Scan a generated workload with StreamScanner and time it.

    If profile=True, wraps the scan in cProfile and includes the stats
    in the result.
    """
    gen = LoadGenerator(
        num_domains=num_domains,
        total_urls=total_urls,
        noise_words=noise_words,
        seed=seed,
    )
    workload = gen.generate()
    text = workload.text

    cprofile_text = None
    t0 = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        scanner = _scan_with_automaton(text)
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        scanner = _scan_with_automaton(text)
    total_ms = (time.perf_counter() - t0) * 1000

    counts = scanner.counts
    counts_match = counts == workload.expected
    if not counts_match:
        log.error(
            "automaton scan disagrees with generated workload: %d urls found, %d expected",
            counts.total, workload.expected.total,
        )

    return ScanResult(
        label="automaton",
        chars_scanned=len(text),
        urls_found=counts.total,
        distinct_domains=counts.distinct_domains,
        distinct_paths=counts.distinct_paths,
        total_time_ms=total_ms,
        chars_per_sec=len(text) / (total_ms / 1000) if total_ms > 0 else 0,
        peak_live=scanner.peak_live,
        counts_match=counts_match,
        cprofile_stats=cprofile_text,
    )


def run_scan_baseline(
    total_urls: int = 5_000,
    num_domains: int = 50,
    noise_words: int = 8,
    seed: int = 42,
) -> ScanResult:
    """Same workload as run_scan(), scanned by the regex baseline."""
    gen = LoadGenerator(
        num_domains=num_domains,
        total_urls=total_urls,
        noise_words=noise_words,
        seed=seed,
    )
    workload = gen.generate()
    text = workload.text

    t0 = time.perf_counter()
    counts = scan_text_regex(text)
    total_ms = (time.perf_counter() - t0) * 1000

    counts_match = counts == workload.expected
    if not counts_match:
        log.error(
            "regex scan disagrees with generated workload: %d urls found, %d expected",
            counts.total, workload.expected.total,
        )

    return ScanResult(
        label="regex baseline",
        chars_scanned=len(text),
        urls_found=counts.total,
        distinct_domains=counts.distinct_domains,
        distinct_paths=counts.distinct_paths,
        total_time_ms=total_ms,
        chars_per_sec=len(text) / (total_ms / 1000) if total_ms > 0 else 0,
        peak_live=None,
        counts_match=counts_match,
    )


def measure_live_set(length: int = 100_000, unit: str = "h") -> int:
    """Peak live set size while scanning a pathological repetition of `unit`."""
    scanner = _scan_with_automaton(pathological_text(length, unit))
    log.debug("pathological %r x %d: peak live set %d", unit, length, scanner.peak_live)
    return scanner.peak_live
