"""achroma.

Data model for human color vision and color vision deficiency (CVD):
named variants, cone cells, and per-cone condition queries.
"""

from achroma.cones import ConeCell, ConeCellCondition, ConeCellSummary, InvalidCodeError
from achroma.core.config import ConeResponseConfig
from achroma.vision import ColorVision, classify, summary_of, variant_of

__all__ = [
    "ColorVision",
    "ConeCell",
    "ConeCellCondition",
    "ConeCellSummary",
    "ConeResponseConfig",
    "InvalidCodeError",
    "classify",
    "summary_of",
    "variant_of",
]

__version__ = "0.1.0"
