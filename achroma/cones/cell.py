"""
Cone cell and cone cell condition enumerations.
"""

from __future__ import annotations

from enum import Enum

from achroma.cones.constants import CODE_TO_INDEX, CONE_COLORS, CONE_LETTERS


class InvalidCodeError(ValueError):
    """Raised when a letter code does not name a cone cell."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Invalid cone cell code: {code!r} (expected one of L/M/S or R/G/B)")
        self.code = code


class ConeCell(Enum):
    """
    A photoreceptor cell of the retina responsible for color vision.

    Members are ordered by descending wavelength sensitivity.
    """

    LONG = 0    # L, mostly red, OPN1LW opsin
    MEDIUM = 1  # M, yellow/green, OPN1MW opsin
    SHORT = 2   # S, mostly blue, OPN1SW opsin

    @property
    def index(self) -> int:
        return self.value

    @property
    def letter(self) -> str:
        return CONE_LETTERS[self.value]

    @property
    def color(self) -> str:
        return CONE_COLORS[self.value]

    @classmethod
    def from_code(cls, code: str) -> "ConeCell":
        """
        Look up a cone cell by a single-letter code, ignoring case.

        Accepts the wavelength letters S, M, L and the primary color
        letters B, G, R.
        """

        if not isinstance(code, str) or len(code) != 1:
            raise InvalidCodeError(code)
        index = CODE_TO_INDEX.get(code)
        if index is None:
            raise InvalidCodeError(code)
        return cls(index)


class ConeCellCondition(Enum):
    """The condition (state of health) of a single cone cell."""

    NORMAL = "normal"        # present and healthy
    ANOMALOUS = "anomalous"  # present with shifted spectral sensitivity
    ABSENT = "absent"        # non-functional or missing

    def is_normal(self) -> bool:
        return self is ConeCellCondition.NORMAL

    def is_anomalous(self) -> bool:
        return self is ConeCellCondition.ANOMALOUS

    def is_absent(self) -> bool:
        return self is ConeCellCondition.ABSENT
