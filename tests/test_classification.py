"""
Tests for the color vision classification table.
"""

from __future__ import annotations

import pytest

from achroma import (
    ColorVision,
    ConeCell,
    ConeCellCondition,
    ConeCellSummary,
    classify,
    summary_of,
    variant_of,
)
from achroma.vision import SUMMARY_TABLE

N = ConeCellCondition.NORMAL
A = ConeCellCondition.ANOMALOUS
X = ConeCellCondition.ABSENT

EXPECTED = {
    ColorVision.NORMAL: (N, N, N),
    ColorVision.PROTANOMALY: (A, N, N),
    ColorVision.PROTANOPIA: (X, N, N),
    ColorVision.DEUTERANOMALY: (N, A, N),
    ColorVision.DEUTERANOPIA: (N, X, N),
    ColorVision.TRITANOMALY: (N, N, A),
    ColorVision.TRITANOPIA: (N, N, X),
    ColorVision.ACHROMATOMALY: (X, X, N),
    ColorVision.ACHROMATOPSIA: (X, X, X),
}


def test_table_is_total_and_distinct() -> None:
    assert set(EXPECTED) == set(ColorVision)
    seen = set()
    for variant in ColorVision:
        summary = summary_of(variant)
        assert summary.as_tuple() == EXPECTED[variant]
        seen.add(summary.as_tuple())
    assert len(seen) == len(ColorVision)


def test_summary_of_is_deterministic() -> None:
    for variant in ColorVision:
        first = summary_of(variant)
        second = summary_of(variant)
        assert first == second
        assert first is not second
        assert variant.summary() == first
        assert ConeCellSummary.from_variant(variant) == first


def test_summary_of_rejects_non_variants() -> None:
    with pytest.raises(TypeError):
        summary_of("protanomaly")  # type: ignore[arg-type]


def test_reverse_lookup() -> None:
    for variant in ColorVision:
        assert variant_of(summary_of(variant)) is variant
        assert ColorVision.from_summary(summary_of(variant)) is variant

    unnamed = ConeCellSummary(A, X, N)
    assert classify(unnamed) is None
    with pytest.raises(ValueError):
        variant_of(unnamed)


def test_protanomaly_scenario() -> None:
    protanomaly = ColorVision.PROTANOMALY
    summary = summary_of(protanomaly)

    assert summary.get(ConeCell.LONG) is A
    assert summary.get(ConeCell.MEDIUM) is N
    assert summary.get(ConeCell.SHORT) is N
    assert protanomaly.is_red_green()
    assert protanomaly.is_anomalous_trichromacy()
    assert not summary.is_cone_normal(ConeCell.LONG)
    assert summary.red.is_anomalous()
    assert summary.get_by_code("B").is_normal()
    assert summary["b"].is_normal()


def test_achromatopsia_scenario() -> None:
    achromatopsia = ColorVision.ACHROMATOPSIA
    summary = summary_of(achromatopsia)

    assert sum(1 for c in summary if c.is_absent()) >= 2
    assert achromatopsia.is_monochromacy()
    assert not achromatopsia.is_anomalous_trichromacy()
    assert not achromatopsia.is_dichromacy()


def test_is_red_green() -> None:
    expected = {
        ColorVision.PROTANOMALY,
        ColorVision.PROTANOPIA,
        ColorVision.DEUTERANOMALY,
        ColorVision.DEUTERANOPIA,
        ColorVision.ACHROMATOMALY,
        ColorVision.ACHROMATOPSIA,
    }
    assert {v for v in ColorVision if v.is_red_green()} == expected


def test_is_blue_yellow() -> None:
    expected = {ColorVision.TRITANOMALY, ColorVision.TRITANOPIA, ColorVision.ACHROMATOPSIA}
    assert {v for v in ColorVision if v.is_blue_yellow()} == expected


def test_is_protan_deutan_tritan() -> None:
    assert {v for v in ColorVision if v.is_protan()} == {
        ColorVision.PROTANOMALY,
        ColorVision.PROTANOPIA,
    }
    assert {v for v in ColorVision if v.is_deutan()} == {
        ColorVision.DEUTERANOMALY,
        ColorVision.DEUTERANOPIA,
    }
    assert {v for v in ColorVision if v.is_tritan()} == {
        ColorVision.TRITANOMALY,
        ColorVision.TRITANOPIA,
    }


def test_trichromacy_dichromacy_monochromacy() -> None:
    assert {v for v in ColorVision if v.is_anomalous_trichromacy()} == {
        ColorVision.PROTANOMALY,
        ColorVision.DEUTERANOMALY,
        ColorVision.TRITANOMALY,
    }
    assert {v for v in ColorVision if v.is_dichromacy()} == {
        ColorVision.PROTANOPIA,
        ColorVision.DEUTERANOPIA,
        ColorVision.TRITANOPIA,
    }
    assert {v for v in ColorVision if v.is_monochromacy()} == {
        ColorVision.ACHROMATOMALY,
        ColorVision.ACHROMATOPSIA,
    }


def test_is_deficient() -> None:
    assert not ColorVision.NORMAL.is_deficient()
    assert all(v.is_deficient() for v in ColorVision if v is not ColorVision.NORMAL)


def test_parse_and_flags() -> None:
    assert ColorVision.parse("Protanopia") is ColorVision.PROTANOPIA
    assert ColorVision.parse("  TRITANOMALY ") is ColorVision.TRITANOMALY
    with pytest.raises(ValueError):
        ColorVision.parse("greenblind")

    flags = [v.flag for v in ColorVision]
    assert flags == [0, 1, 2, 4, 8, 16, 32, 64, 128]


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        SUMMARY_TABLE[ColorVision.PROTANOMALY] = (X, N, N)  # type: ignore[index]

    stored = SUMMARY_TABLE[ColorVision.PROTANOMALY]
    assert isinstance(stored, tuple)

    handed_out = summary_of(ColorVision.PROTANOMALY)
    handed_out.set(ConeCell.LONG, X)
    assert summary_of(ColorVision.PROTANOMALY).long is A
    assert variant_of(ConeCellSummary(A, N, N)) is ColorVision.PROTANOMALY
