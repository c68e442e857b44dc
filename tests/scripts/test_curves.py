import math

import pytest

from audit_sampling.sampling.types import RiskLevel
from audit_sampling.scripts.curves import (
    calculate_sample_size_curve,
    policy_table_frame,
)
from audit_sampling.scripts.policy import build_policy


def test_curve_covers_population_range() -> None:
    curve = calculate_sample_size_curve(RiskLevel.LOW)
    assert list(curve.columns) == ["population", "sample_size", "method"]
    assert len(curve) == 250
    assert curve["population"].iloc[0] == 1
    assert curve["population"].iloc[-1] == 250


def test_curve_values() -> None:
    curve = calculate_sample_size_curve(RiskLevel.LOW).set_index("population")
    assert curve.loc[150, "sample_size"] == 13
    assert curve.loc[150, "method"] == "interpolated"
    assert curve.loc[52, "sample_size"] == 5
    assert curve.loc[52, "method"] == "standard"


def test_curve_with_oversized_populations() -> None:
    curve = calculate_sample_size_curve(
        RiskLevel.HIGH, min_population=249, max_population=252
    )
    assert curve["method"].tolist() == [
        "interpolated",
        "standard",
        "oversized",
        "oversized",
    ]
    assert curve["sample_size"].tolist()[-2:] == [60, 60]


@pytest.mark.parametrize("risk_level", list(RiskLevel))
def test_curve_never_decreases(risk_level) -> None:
    curve = calculate_sample_size_curve(risk_level, max_population=300)
    assert curve["sample_size"].is_monotonic_increasing


def test_curve_marks_non_standard_breakpoints() -> None:
    policy = build_policy(
        {"breakpoints": {"Medium": [[250, 25], [100, 15], [52, 8], [1, 1]]}}
    )
    curve = calculate_sample_size_curve(
        RiskLevel.MEDIUM, min_population=100, max_population=100, policy=policy
    )
    assert curve["method"].tolist() == ["breakpoint"]
    assert curve["sample_size"].tolist() == [15]


def test_curve_rejects_empty_range() -> None:
    with pytest.raises(ValueError):
        calculate_sample_size_curve(RiskLevel.LOW, min_population=0)
    with pytest.raises(ValueError):
        calculate_sample_size_curve(RiskLevel.LOW, min_population=10, max_population=5)


def test_policy_table_frame() -> None:
    frame = policy_table_frame()
    assert frame.shape == (7, 4)
    assert frame.loc["Weekly", "Medium"] == 8
    assert frame.loc["Weekly", "expected_population"] == 52
    assert math.isnan(frame.loc["Multiple per day", "expected_population"])
