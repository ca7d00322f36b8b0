"""
Lookup table from color vision variant to cone cell conditions.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from achroma.cones.cell import ConeCellCondition
from achroma.cones.summary import ConeCellSummary
from achroma.vision.variant import ColorVision

logger = logging.getLogger(__name__)

Conditions = Tuple[ConeCellCondition, ConeCellCondition, ConeCellCondition]

_N = ConeCellCondition.NORMAL
_A = ConeCellCondition.ANOMALOUS
_X = ConeCellCondition.ABSENT

# (long, medium, short) per variant. Read-only; summary_of builds a new
# summary from these on every call.
SUMMARY_TABLE: Mapping[ColorVision, Conditions] = MappingProxyType(
    {
        ColorVision.NORMAL: (_N, _N, _N),
        ColorVision.PROTANOMALY: (_A, _N, _N),
        ColorVision.PROTANOPIA: (_X, _N, _N),
        ColorVision.DEUTERANOMALY: (_N, _A, _N),
        ColorVision.DEUTERANOPIA: (_N, _X, _N),
        ColorVision.TRITANOMALY: (_N, _N, _A),
        ColorVision.TRITANOPIA: (_N, _N, _X),
        ColorVision.ACHROMATOMALY: (_X, _X, _N),
        ColorVision.ACHROMATOPSIA: (_X, _X, _X),
    }
)

_REVERSE: Mapping[Conditions, ColorVision] = MappingProxyType(
    {conditions: variant for variant, conditions in SUMMARY_TABLE.items()}
)


def summary_of(variant: ColorVision) -> ConeCellSummary:
    """Return a new summary holding the cone cell conditions of ``variant``."""

    if not isinstance(variant, ColorVision):
        raise TypeError(f"Expected ColorVision, got {type(variant).__name__}")
    return ConeCellSummary(*SUMMARY_TABLE[variant])


def classify(summary: ConeCellSummary) -> Optional[ColorVision]:
    """Return the named variant matching ``summary``, or ``None``."""

    variant = _REVERSE.get(summary.as_tuple())
    if variant is None:
        logger.debug("No named color vision for cone conditions %s", summary.as_tuple())
    return variant


def variant_of(summary: ConeCellSummary) -> ColorVision:
    """Return the named variant matching ``summary``."""

    variant = classify(summary)
    if variant is None:
        raise ValueError(
            "Cone cell conditions (%s) match no named color vision"
            % ", ".join(c.value for c in summary.as_tuple())
        )
    return variant
