"""
Three-slot record of cone cell conditions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from achroma.cones.cell import ConeCell, ConeCellCondition

if TYPE_CHECKING:  # pragma: no cover
    from achroma.core.config import ConeResponseConfig
    from achroma.vision.variant import ColorVision

logger = logging.getLogger(__name__)

CellKey = Union[ConeCell, str, int]


def _resolve(key: CellKey) -> ConeCell:
    if isinstance(key, ConeCell):
        return key
    if isinstance(key, str):
        return ConeCell.from_code(key)
    if isinstance(key, int) and not isinstance(key, bool):
        if not (0 <= key <= 2):
            raise IndexError(f"Invalid cone cell index: {key}")
        return ConeCell(key)
    raise TypeError(f"Cone cells are addressed by ConeCell, letter code or index, got {type(key).__name__}")


@dataclass
class ConeCellSummary:
    """
    The conditions of all three cone cells, in descending order of
    wavelength sensitivity (long, medium, short).

    Slots can be read and written by :class:`ConeCell`, by a letter code
    (``'L'``/``'R'``, ``'M'``/``'G'``, ``'S'``/``'B'``, any case) or by
    index 0-2::

        summary = ConeCellSummary.from_variant(ColorVision.PROTANOMALY)
        summary[ConeCell.LONG]   # ConeCellCondition.ANOMALOUS
        summary["b"].is_normal() # True
    """

    long: ConeCellCondition = ConeCellCondition.NORMAL
    medium: ConeCellCondition = ConeCellCondition.NORMAL
    short: ConeCellCondition = ConeCellCondition.NORMAL

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIELD_NAMES:
            _check_condition(value)
        super().__setattr__(name, value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def rgb(
        cls, red: ConeCellCondition, green: ConeCellCondition, blue: ConeCellCondition
    ) -> "ConeCellSummary":
        """Create a summary by cone cell colors."""

        return cls(red, green, blue)

    @classmethod
    def from_sequence(cls, conditions: Sequence[ConeCellCondition]) -> "ConeCellSummary":
        if len(conditions) != 3:
            raise ValueError(f"Expected 3 cone cell conditions, got {len(conditions)}")
        return cls(*conditions)

    @classmethod
    def from_variant(cls, variant: "ColorVision") -> "ConeCellSummary":
        from achroma.vision.table import summary_of

        return summary_of(variant)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def get(self, cell: ConeCell) -> ConeCellCondition:
        return getattr(self, _FIELDS[cell])

    def get_by_code(self, code: str) -> ConeCellCondition:
        return self.get(ConeCell.from_code(code))

    def set(self, cell: ConeCell, condition: ConeCellCondition) -> None:
        _check_condition(condition)
        setattr(self, _FIELDS[cell], condition)

    def set_by_code(self, code: str, condition: ConeCellCondition) -> None:
        self.set(ConeCell.from_code(code), condition)

    def __getitem__(self, key: CellKey) -> ConeCellCondition:
        return self.get(_resolve(key))

    def __setitem__(self, key: CellKey, condition: ConeCellCondition) -> None:
        self.set(_resolve(key), condition)

    def __iter__(self) -> Iterator[ConeCellCondition]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return 3

    @property
    def red(self) -> ConeCellCondition:
        return self.long

    @property
    def green(self) -> ConeCellCondition:
        return self.medium

    @property
    def blue(self) -> ConeCellCondition:
        return self.short

    # ------------------------------------------------------------------
    # Per-cell queries
    # ------------------------------------------------------------------
    def is_cone_normal(self, cell: ConeCell) -> bool:
        return self.get(cell).is_normal()

    def is_cone_anomalous(self, cell: ConeCell) -> bool:
        return self.get(cell).is_anomalous()

    def is_cone_absent(self, cell: ConeCell) -> bool:
        return self.get(cell).is_absent()

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def _count(self, condition: ConeCellCondition) -> int:
        return sum(1 for c in self.as_tuple() if c is condition)

    def _only_affected(self, cell: ConeCell) -> bool:
        return all(self.get(other).is_normal() != (other is cell) for other in ConeCell)

    def is_normal(self) -> bool:
        """Normal trichromatic vision: all three cells are normal."""

        return self._count(ConeCellCondition.NORMAL) == 3

    def is_red_green(self) -> bool:
        """The long or the medium cell is not normal."""

        return not (self.long.is_normal() and self.medium.is_normal())

    def is_blue_yellow(self) -> bool:
        """The short cell is not normal."""

        return not self.short.is_normal()

    def is_protan(self) -> bool:
        return self._only_affected(ConeCell.LONG)

    def is_deutan(self) -> bool:
        return self._only_affected(ConeCell.MEDIUM)

    def is_tritan(self) -> bool:
        return self._only_affected(ConeCell.SHORT)

    def is_anomalous_trichromacy(self) -> bool:
        """Exactly one anomalous cell, the other two normal."""

        return (
            self._count(ConeCellCondition.ANOMALOUS) == 1
            and self._count(ConeCellCondition.NORMAL) == 2
        )

    def is_dichromacy(self) -> bool:
        """Exactly one absent cell, the other two normal."""

        return (
            self._count(ConeCellCondition.ABSENT) == 1
            and self._count(ConeCellCondition.NORMAL) == 2
        )

    def is_monochromacy(self) -> bool:
        """Two or more absent cells."""

        return self._count(ConeCellCondition.ABSENT) >= 2

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def as_tuple(self) -> Tuple[ConeCellCondition, ConeCellCondition, ConeCellCondition]:
        return (self.long, self.medium, self.short)

    def as_list(self) -> List[ConeCellCondition]:
        return list(self.as_tuple())

    def copy(self) -> "ConeCellSummary":
        return replace(self)

    def channel_weights(self, config: Optional["ConeResponseConfig"] = None) -> np.ndarray:
        """
        Per-channel sensitivity weights in RGB (= LMS) order.

        Args:
            config: Weight assigned to each condition. Defaults to
                :class:`~achroma.core.config.ConeResponseConfig`.

        Returns:
            Float array of shape ``(3,)``.
        """

        from achroma.core.config import ConeResponseConfig

        if config is None:
            config = ConeResponseConfig()
        else:
            logger.debug("Channel weights with custom config: %s", config)
        config.validate()

        return np.array([config.weight_for(c) for c in self.as_tuple()], dtype=np.float64)


_FIELDS = {
    ConeCell.LONG: "long",
    ConeCell.MEDIUM: "medium",
    ConeCell.SHORT: "short",
}
_FIELD_NAMES = frozenset(_FIELDS.values())


def _check_condition(condition: object) -> None:
    if not isinstance(condition, ConeCellCondition):
        raise TypeError(f"Expected ConeCellCondition, got {type(condition).__name__}")
