"""Color vision variants and their cone cell classification."""

from achroma.vision.table import SUMMARY_TABLE, classify, summary_of, variant_of
from achroma.vision.variant import ColorVision

__all__ = [
    "ColorVision",
    "SUMMARY_TABLE",
    "classify",
    "summary_of",
    "variant_of",
]
