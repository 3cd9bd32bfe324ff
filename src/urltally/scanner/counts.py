"""Match records and the aggregate counters they feed."""
from __future__ import annotations

from dataclasses import dataclass, field

from urltally.scanner.types import Count, DomainName, UrlPath


@dataclass(frozen=True, slots=True)
class UrlMatch:
    """One recognized URL: folded domain plus verbatim path."""
    domain: DomainName
    path: UrlPath


@dataclass(slots=True)
class UrlCounts:
    """Occurrence counters for domains and paths.

    Every recorded match increments `total`, one domain entry and one
    path entry, so total == sum(domains.values()) == sum(paths.values())
    holds at all times. Entries are never removed.
    """
    domains: dict[DomainName, Count] = field(default_factory=dict)
    paths: dict[UrlPath, Count] = field(default_factory=dict)
    total: Count = 0

    @property
    def distinct_domains(self) -> int:
        return len(self.domains)

    @property
    def distinct_paths(self) -> int:
        return len(self.paths)

    def record(self, match: UrlMatch) -> None:
        self.total += 1
        self.domains[match.domain] = self.domains.get(match.domain, 0) + 1
        self.paths[match.path] = self.paths.get(match.path, 0) + 1

    def merge(self, other: UrlCounts) -> None:
        """Add every counter of `other` into this one."""
        self.total += other.total
        for domain, count in other.domains.items():
            self.domains[domain] = self.domains.get(domain, 0) + count
        for path, count in other.paths.items():
            self.paths[path] = self.paths.get(path, 0) + count
