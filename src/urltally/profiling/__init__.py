"""Profiling harness and workload generation for urltally."""

from urltally.profiling.harness import (
    ScanResult,
    measure_live_set,
    run_scan,
    run_scan_baseline,
)
from urltally.profiling.load_generator import GeneratedText, LoadGenerator, pathological_text
from urltally.profiling.report import format_comparison, format_scan_report

__all__ = [
    "GeneratedText",
    "LoadGenerator",
    "ScanResult",
    "format_comparison",
    "format_scan_report",
    "measure_live_set",
    "pathological_text",
    "run_scan",
    "run_scan_baseline",
]
