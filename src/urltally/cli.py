"""urltally CLI entry point.

Usage: urltally [--log-level LEVEL] count [-n N] INPUT OUTPUT
       urltally [--log-level LEVEL] profile [options]
"""
import argparse
import logging
import sys

from urltally.scanner.stream import StreamScanner

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024

# Inputs scanned by `profile` to show the live set bound.
_PATHOLOGICAL_UNITS = ("h", "http", "https://", "http://a")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must be non-negative, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("value must be positive")
    return number


def _add_count_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "count",
        help="Count URL domains and paths in a text file.",
    )
    p.add_argument("input", help="Text file to scan.")
    p.add_argument("output", help="Report file to write ('-' for stdout).")
    p.add_argument(
        "-n", "--top", type=_non_negative_int, default=None,
        help="Show only the N most frequent domains and paths (default: all)",
    )
    p.add_argument(
        "--encoding", default="utf-8",
        help="Input text encoding; undecodable bytes are replaced (default: utf-8)",
    )
    p.add_argument(
        "--chunk-size", type=_positive_int, default=DEFAULT_CHUNK_SIZE,
        help=f"Characters read per chunk (default: {DEFAULT_CHUNK_SIZE})",
    )


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Scan a synthetic workload and report throughput.",
    )
    p.add_argument(
        "--urls", type=_non_negative_int, default=5_000,
        help="URLs embedded in the workload (default: 5000)",
    )
    p.add_argument(
        "--domains", type=_positive_int, default=50,
        help="Number of distinct domains (default: 50)",
    )
    p.add_argument(
        "--noise-words", type=_non_negative_int, default=8,
        help="Maximum filler words between URLs (default: 8)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )
    p.add_argument(
        "--compare", action="store_true",
        help="Also scan with the regex baseline and print a comparison.",
    )


def _run_count(args: argparse.Namespace) -> int:
    from urltally.reporting.formatter import format_report

    scanner = StreamScanner()
    try:
        with open(args.input, encoding=args.encoding, errors="replace") as f:
            while chunk := f.read(args.chunk_size):
                scanner.feed(chunk)
    except (OSError, LookupError) as exc:
        log.error("cannot read %s: %s", args.input, exc)
        return 1
    scanner.flush()
    log.info(
        "scanned %d chars from %s: %d url(s), peak live set %d",
        scanner.chars_consumed, args.input, scanner.counts.total, scanner.peak_live,
    )

    report = format_report(scanner.counts, limit=args.top)
    if args.output == "-":
        sys.stdout.write(report)
        return 0
    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(report)
    except OSError as exc:
        log.error("cannot write %s: %s", args.output, exc)
        return 1
    log.info("report written to %s", args.output)
    return 0


def _run_profile(args: argparse.Namespace) -> int:
    from urltally.profiling.harness import measure_live_set, run_scan, run_scan_baseline
    from urltally.profiling.report import format_comparison, format_scan_report

    common = dict(
        total_urls=args.urls,
        num_domains=args.domains,
        noise_words=args.noise_words,
        seed=args.seed,
    )

    result = run_scan(**common, profile=args.cprofile)
    print(format_scan_report(result))
    if args.compare:
        baseline = run_scan_baseline(**common)
        print()
        print(format_scan_report(baseline))
        print()
        print(format_comparison(result, baseline))

    print()
    print("--- live set on pathological input (10,000 chars) ---")
    for unit in _PATHOLOGICAL_UNITS:
        print(f"{unit!r:<12} peak {measure_live_set(10_000, unit)}")

    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)
    return 0 if result.counts_match else 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="urltally",
        description="Count URL domains and paths in a character stream.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_count_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "count":
        sys.exit(_run_count(args))
    if args.command == "profile":
        sys.exit(_run_profile(args))
