"""Strip single-line ``print(...);`` statements from a source tree."""

from __future__ import annotations

__version__ = "0.1.0"
