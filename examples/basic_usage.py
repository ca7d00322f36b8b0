"""
Basic usage examples for achroma.
"""

from __future__ import annotations

import numpy as np

from achroma import ColorVision, ConeCell, ConeResponseConfig, summary_of


def example_protanomaly() -> None:
    """Query a single variant and its cone cells."""

    protanomaly = ColorVision.PROTANOMALY
    summary = summary_of(protanomaly)
    print(f"Protanomaly cones: {[c.value for c in summary]}")
    print(f"  red-green: {protanomaly.is_red_green()}")
    print(f"  anomalous trichromacy: {protanomaly.is_anomalous_trichromacy()}")
    print(f"  long cone normal: {summary.is_cone_normal(ConeCell.LONG)}")
    print(f"  blue cone ('B') normal: {summary['B'].is_normal()}")


def example_channel_weights() -> np.ndarray:
    """Per-channel weights for choosing an image filter."""

    config = ConeResponseConfig(anomalous_weight=0.3)
    weights = np.stack([summary_of(v).channel_weights(config) for v in ColorVision])
    for variant, row in zip(ColorVision, weights):
        print(f"{variant.value:>14}: {row}")
    return weights


if __name__ == "__main__":
    print("Running achroma basic examples...")
    example_protanomaly()
    example_channel_weights()
