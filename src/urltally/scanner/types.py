"""Shared type aliases used across the scanner."""
from __future__ import annotations

from typing import TypeAlias

DomainName: TypeAlias = str  # ASCII lowercase
UrlPath: TypeAlias = str  # always starts with "/"
Count: TypeAlias = int
