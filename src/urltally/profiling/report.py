"""Report generation for profiling results.

Formats ScanResult data into human-readable tables for terminal output.
"""
from __future__ import annotations

from urltally.profiling.harness import ScanResult


def format_scan_report(result: ScanResult) -> str:
    """Format a ScanResult as a readable report string."""
    peak = "n/a" if result.peak_live is None else f"{result.peak_live:,}"
    lines = [
        f"=== {result.label} ===",
        f"Characters:        {result.chars_scanned:,}",
        f"URLs found:        {result.urls_found:,}",
        f"Distinct domains:  {result.distinct_domains:,}",
        f"Distinct paths:    {result.distinct_paths:,}",
        f"Total time:        {result.total_time_ms:.1f} ms",
        f"Throughput:        {result.chars_per_sec:,.0f} chars/sec",
        f"Peak live set:     {peak}",
        f"Counts verified:   {'yes' if result.counts_match else 'NO'}",
    ]
    return "\n".join(lines)


def format_comparison(automaton: ScanResult, baseline: ScanResult) -> str:
    """Format an automaton vs. baseline comparison table."""

    def _ratio(old: float, new: float) -> str:
        if new <= 0:
            return "inf"
        return f"{old / new:.1f}x"

    lines = [
        f"{'Metric':<24} {'Automaton':>14} {'Baseline':>14} {'Ratio':>8}",
        "-" * 63,
        f"{'Total time (ms)':<24} {automaton.total_time_ms:>14.1f} "
        f"{baseline.total_time_ms:>14.1f} "
        f"{_ratio(automaton.total_time_ms, baseline.total_time_ms):>8}",
        f"{'Throughput (chars/sec)':<24} {automaton.chars_per_sec:>14,.0f} "
        f"{baseline.chars_per_sec:>14,.0f} "
        f"{_ratio(baseline.chars_per_sec, automaton.chars_per_sec):>8}",
        f"{'URLs found':<24} {automaton.urls_found:>14,} "
        f"{baseline.urls_found:>14,} {'':>8}",
    ]
    return "\n".join(lines)
