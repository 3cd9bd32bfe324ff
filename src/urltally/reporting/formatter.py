"""Text report for a finished scan.

Layout:

    total urls 3, domains 2, paths 3

    top domains
    2 foo.com
    1 bar.org

    top paths
    1 /
    1 /a
    1 /b

Each entry line is "<count> <key>". Sections follow ranking order
(count descending, key ascending).
"""
from __future__ import annotations

from collections.abc import Mapping

from urltally.reporting.ranking import rank_counts
from urltally.scanner.counts import UrlCounts


def format_section(
    header: str,
    counts: Mapping[str, int],
    limit: int | None = None,
) -> str:
    """Render one "top <header>" block, without the leading blank line."""
    lines = [f"top {header}"]
    lines.extend(f"{count} {key}" for key, count in rank_counts(counts, limit))
    return "\n".join(lines)


def format_report(counts: UrlCounts, limit: int | None = None) -> str:
    """Format the summary line plus the domain and path sections."""
    parts = [
        f"total urls {counts.total}, domains {counts.distinct_domains}, "
        f"paths {counts.distinct_paths}",
        format_section("domains", counts.domains, limit),
        format_section("paths", counts.paths, limit),
    ]
    return "\n\n".join(parts) + "\n"
