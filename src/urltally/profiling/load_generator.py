"""Synthetic text with embedded URLs for profiling.

Text pattern:
  - total_urls URLs drawn from num_domains domains with a Zipf-like
    distribution (top 10% of domains carry most of the URLs)
  - about half of the URLs carry a path, the rest end at the domain
  - domains are randomly upper-cased to exercise folding
  - noise_words filler words between consecutive URLs, some of which
    start like a scheme ("http", "https:/") and must not match

Tokens are separated by single spaces or newlines, which end both the
domain and path classes, so the generator knows the exact expected
counts without scanning.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

from urltally.scanner.counts import UrlCounts, UrlMatch

_TLD = ["com", "org", "io", "net", "dev"]
_SITES = [
    "example", "python", "github", "gitlab", "wikipedia",
    "archive", "mozilla", "kernel", "debian", "pypi",
    "readthedocs", "sourceforge", "stackoverflow", "gnu", "apache",
]
_SUBDOMAINS = ["www", "docs", "api", "cdn", "mail", "blog", "dl", "static"]
_PATH_SEGMENTS = [
    "index.html", "about", "v1", "v2", "users", "search", "download",
    "release_notes", "a+b", "2024", "img", "page,2", "src",
]
_NOISE = [
    "the", "and", "see", "link", "at", "here:", "(source)", "http",
    "htp://nope", "https:/", "mailto:someone", "ftp://mirror.org",
    "hhhh", "http//", "-", "done.",
]


@dataclass(slots=True)
class GeneratedText:
    """Synthetic input plus the counts a correct scan must produce."""
    text: str
    expected: UrlCounts


class LoadGenerator:
    """Generate deterministic scan workloads."""

    __slots__ = ("_rng", "_domains", "_total_urls", "_noise_words", "_zipf_weights")

    def __init__(
        self,
        num_domains: int = 50,
        total_urls: int = 5_000,
        noise_words: int = 8,
        seed: int = 42,
    ) -> None:
        if num_domains < 1:
            raise ValueError(f"num_domains must be positive, got {num_domains}")
        if total_urls < 0 or noise_words < 0:
            raise ValueError(
                f"total_urls and noise_words must be non-negative, "
                f"got {total_urls}, {noise_words}"
            )
        self._rng = random.Random(seed)
        self._total_urls = total_urls
        self._noise_words = noise_words
        self._domains = self._generate_domains(num_domains)
        # Zipf weights: domain i has weight 1/(i+1)
        self._zipf_weights = [1.0 / (i + 1) for i in range(num_domains)]

    def _generate_domains(self, n: int) -> list[str]:
        domains = []
        for i in range(n):
            sub = self._rng.choice(_SUBDOMAINS)
            site = self._rng.choice(_SITES)
            tld = self._rng.choice(_TLD)
            # index suffix keeps domains distinct
            domains.append(f"{sub}.{site}-{i}.{tld}")
        return domains

    @property
    def domains(self) -> list[str]:
        return self._domains

    def _random_case(self, domain: str) -> str:
        if self._rng.random() < 0.7:
            return domain
        return "".join(
            c.upper() if self._rng.random() < 0.5 else c for c in domain
        )

    def _random_path(self) -> str | None:
        if self._rng.random() < 0.5:
            return None
        depth = self._rng.randint(1, 3)
        return "/" + "/".join(self._rng.choices(_PATH_SEGMENTS, k=depth))

    def generate(self) -> GeneratedText:
        """Build the whole text (not an iterator, for profiling)."""
        expected = UrlCounts()
        tokens: list[str] = []

        for _ in range(self._total_urls):
            for _ in range(self._rng.randint(0, self._noise_words)):
                tokens.append(self._rng.choice(_NOISE))

            domain_idx = self._rng.choices(
                range(len(self._domains)),
                weights=self._zipf_weights,
                k=1,
            )[0]
            domain = self._domains[domain_idx]
            scheme = self._rng.choice(["http", "https"])
            path = self._random_path()
            tokens.append(f"{scheme}://{self._random_case(domain)}{path or ''}")
            expected.record(UrlMatch(domain=domain, path=path or "/"))

        parts: list[str] = []
        for token in tokens:
            parts.append(token)
            parts.append("\n" if self._rng.random() < 0.1 else " ")
        return GeneratedText(text="".join(parts), expected=expected)


def pathological_text(length: int, unit: str = "h") -> str:
    """Repeat `unit` up to `length` characters.

    Runs of "h", "http" or "http://" keep a candidate alive or respawn
    one on every character, which is the scanner's worst case.
    """
    if not unit:
        raise ValueError("unit must be a non-empty string")
    repeats = length // len(unit) + 1
    return (unit * repeats)[:length]
