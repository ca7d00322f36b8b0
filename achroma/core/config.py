"""
Configuration primitives for achroma.

Defines a dataclass collecting the per-condition weights used when a cone
cell summary is turned into per-channel sensitivity weights.
"""

from dataclasses import dataclass

from achroma.cones.cell import ConeCellCondition


@dataclass
class ConeResponseConfig:
    """
    Relative sensitivity assigned to each cone cell condition.

    All parameters have sensible defaults for filter selection.
    """

    normal_weight: float = 1.0
    anomalous_weight: float = 0.5  # reduced, not removed
    absent_weight: float = 0.0

    def validate(self) -> None:
        """Validate configuration parameters."""

        for name in ("normal_weight", "anomalous_weight", "absent_weight"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} {value} out of range [0, 1]")

        if not (self.absent_weight <= self.anomalous_weight <= self.normal_weight):
            raise ValueError(
                "Weights must satisfy absent_weight <= anomalous_weight <= normal_weight, "
                f"got {self.absent_weight}, {self.anomalous_weight}, {self.normal_weight}"
            )

    def weight_for(self, condition: ConeCellCondition) -> float:
        if condition is ConeCellCondition.NORMAL:
            return self.normal_weight
        if condition is ConeCellCondition.ANOMALOUS:
            return self.anomalous_weight
        if condition is ConeCellCondition.ABSENT:
            return self.absent_weight
        raise ValueError(f"Unknown cone cell condition: {condition}")
