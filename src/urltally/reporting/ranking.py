"""Top-N ranking of counter mappings."""
from __future__ import annotations

from collections.abc import Mapping


def rank_counts(
    counts: Mapping[str, int],
    limit: int | None = None,
) -> list[tuple[str, int]]:
    """Order entries by count descending, then key ascending.

    Returns at most `limit` (key, count) pairs; all of them when
    `limit` is None. The input mapping is not modified.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    if limit is None:
        return ranked
    return ranked[:limit]
