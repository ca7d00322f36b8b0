"""
Named types of color vision, including normal trichromatic vision and the
types of color vision deficiency (CVD).

| Color vision  | L cone cell | M cone cell | S cone cell |
| ------------- | ----------- | ----------- | ----------- |
| Normal        | Normal      | Normal      | Normal      |
| Protanomaly   | Anomalous   | Normal      | Normal      |
| Protanopia    | Absent      | Normal      | Normal      |
| Deuteranomaly | Normal      | Anomalous   | Normal      |
| Deuteranopia  | Normal      | Absent      | Normal      |
| Tritanomaly   | Normal      | Normal      | Anomalous   |
| Tritanopia    | Normal      | Normal      | Absent      |
| Achromatomaly | Absent      | Absent      | Normal      |
| Achromatopsia | Absent      | Absent      | Absent      |
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from achroma.cones.summary import ConeCellSummary


class ColorVision(Enum):
    """Color vision variant."""

    NORMAL = "normal"                # trichromat
    PROTANOMALY = "protanomaly"      # reduced sensitivity to red light
    PROTANOPIA = "protanopia"        # blindness to red light
    DEUTERANOMALY = "deuteranomaly"  # reduced sensitivity to green light
    DEUTERANOPIA = "deuteranopia"    # blindness to green light
    TRITANOMALY = "tritanomaly"      # reduced sensitivity to blue light
    TRITANOPIA = "tritanopia"        # blindness to blue light
    ACHROMATOMALY = "achromatomaly"  # reduced sensitivity to all colors
    ACHROMATOPSIA = "achromatopsia"  # total color blindness

    @property
    def flag(self) -> int:
        """Single-bit code of the variant, 0 for normal vision."""

        return _FLAGS[self]

    @classmethod
    def parse(cls, name: str) -> "ColorVision":
        """Look up a variant by name, ignoring case and surrounding whitespace."""

        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown color vision: {name!r}") from None

    @classmethod
    def from_summary(cls, summary: "ConeCellSummary") -> "ColorVision":
        from achroma.vision.table import variant_of

        return variant_of(summary)

    def summary(self) -> "ConeCellSummary":
        """The cone cell conditions of this variant, as a new summary."""

        from achroma.vision.table import summary_of

        return summary_of(self)

    def is_deficient(self) -> bool:
        return not self.summary().is_normal()

    def is_red_green(self) -> bool:
        """Red-green CVD: the long or medium cone cell is affected."""

        return self.summary().is_red_green()

    def is_blue_yellow(self) -> bool:
        """Blue-yellow CVD: the short cone cell is affected."""

        return self.summary().is_blue_yellow()

    def is_protan(self) -> bool:
        return self.summary().is_protan()

    def is_deutan(self) -> bool:
        return self.summary().is_deutan()

    def is_tritan(self) -> bool:
        return self.summary().is_tritan()

    def is_anomalous_trichromacy(self) -> bool:
        return self.summary().is_anomalous_trichromacy()

    def is_dichromacy(self) -> bool:
        return self.summary().is_dichromacy()

    def is_monochromacy(self) -> bool:
        return self.summary().is_monochromacy()


_FLAGS = {
    ColorVision.NORMAL: 0,
    ColorVision.PROTANOMALY: 1,
    ColorVision.PROTANOPIA: 2,
    ColorVision.DEUTERANOMALY: 4,
    ColorVision.DEUTERANOPIA: 8,
    ColorVision.TRITANOMALY: 16,
    ColorVision.TRITANOPIA: 32,
    ColorVision.ACHROMATOMALY: 64,
    ColorVision.ACHROMATOPSIA: 128,
}
