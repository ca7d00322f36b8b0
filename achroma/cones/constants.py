"""Shared cone cell code definitions."""

from __future__ import annotations

from typing import Dict, Tuple

# Canonical cone ordering used throughout the package. The order mirrors the
# storage layout of RGB images and LMS responses (R → L, G → M, B → S).
CONE_LETTERS: Tuple[str, str, str] = ("L", "M", "S")
CONE_COLORS: Tuple[str, str, str] = ("R", "G", "B")

# Letter code to slot index, both cases spelled out. Only these twelve ASCII
# letters are accepted; Unicode case folding is never applied.
CODE_TO_INDEX: Dict[str, int] = {
    "L": 0,
    "l": 0,
    "R": 0,
    "r": 0,
    "M": 1,
    "m": 1,
    "G": 1,
    "g": 1,
    "S": 2,
    "s": 2,
    "B": 2,
    "b": 2,
}
