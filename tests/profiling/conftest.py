"""Shared fixtures for profiling tests."""

from __future__ import annotations

import pytest

from urltally.profiling.load_generator import GeneratedText, LoadGenerator

SEED = 42


@pytest.fixture
def small_workload() -> GeneratedText:
    return LoadGenerator(num_domains=20, total_urls=300, noise_words=5, seed=SEED).generate()
