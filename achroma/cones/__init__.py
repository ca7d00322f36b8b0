"""Cone cell models."""

from achroma.cones.cell import ConeCell, ConeCellCondition, InvalidCodeError
from achroma.cones.summary import ConeCellSummary

__all__ = [
    "ConeCell",
    "ConeCellCondition",
    "ConeCellSummary",
    "InvalidCodeError",
]
