"""Ranking and text reports for scan results."""

from urltally.reporting.formatter import format_report, format_section
from urltally.reporting.ranking import rank_counts

__all__ = [
    "format_report",
    "format_section",
    "rank_counts",
]
