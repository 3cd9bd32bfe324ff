"""Shared helpers for CLI tests."""

from __future__ import annotations

import pytest

from urltally.cli import main

SAMPLE_TEXT = (
    "Docs live at http://docs.example.com/guide/index.html and "
    "https://Docs.Example.com/api, mirrors at http://mirror.org and\n"
    "http://mirror.org/ (same path). Broken: htto://nope.com http:/x.\n"
)


def run_cli(argv: list[str]) -> int:
    """Run main() and return its exit status."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    code = exc_info.value.code
    return 0 if code is None else code


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
