import math

import pytest

from audit_sampling.sampling.types import (
    ErrorKind,
    Frequency,
    RiskLevel,
    SampleSizeError,
)
from audit_sampling.scripts.validation import (
    coerce_frequency,
    coerce_population,
    coerce_risk_level,
    validate_inputs,
)


@pytest.mark.parametrize(
    "raw, expected", [(52, 52), (52.0, 52), ("52", 52), (" 12 ", 12), ("4.0", 4)]
)
def test_population_coercion(raw, expected) -> None:
    assert coerce_population(raw) == expected


@pytest.mark.parametrize(
    "raw", [0, -3, 0.5, 51.5, True, None, "", "abc", math.nan, math.inf, [52]]
)
def test_invalid_population(raw) -> None:
    with pytest.raises(SampleSizeError) as exc_info:
        coerce_population(raw)
    assert exc_info.value.kind is ErrorKind.INVALID_POPULATION


def test_custom_population_message() -> None:
    with pytest.raises(SampleSizeError) as exc_info:
        coerce_population(0, "Please enter a valid sub-population (minimum 1)")
    assert exc_info.value.message == "Please enter a valid sub-population (minimum 1)"


def test_risk_level_coercion() -> None:
    assert coerce_risk_level(RiskLevel.LOW) is RiskLevel.LOW
    assert coerce_risk_level("Medium") is RiskLevel.MEDIUM
    for raw in ("Severe", None, 2):
        with pytest.raises(SampleSizeError) as exc_info:
            coerce_risk_level(raw)
        assert exc_info.value.kind is ErrorKind.INVALID_RISK_LEVEL


def test_frequency_coercion() -> None:
    assert coerce_frequency(Frequency.DAILY) is Frequency.DAILY
    assert coerce_frequency("as needed") is Frequency.AS_NEEDED
    for raw in ("Hourly", None, 7):
        with pytest.raises(SampleSizeError) as exc_info:
            coerce_frequency(raw)
        assert exc_info.value.kind is ErrorKind.INVALID_FREQUENCY


def test_validate_inputs_precedence() -> None:
    with pytest.raises(SampleSizeError) as exc_info:
        validate_inputs(-1, "Bad", "Bad")
    assert exc_info.value.kind is ErrorKind.INVALID_POPULATION

    with pytest.raises(SampleSizeError) as exc_info:
        validate_inputs(1, "Bad", "Bad")
    assert exc_info.value.kind is ErrorKind.INVALID_RISK_LEVEL

    with pytest.raises(SampleSizeError) as exc_info:
        validate_inputs(1, "Low", "Bad")
    assert exc_info.value.kind is ErrorKind.INVALID_FREQUENCY


def test_validate_inputs_returns_typed_inputs() -> None:
    inputs = validate_inputs("24", "high", "Bi-Weekly")
    assert inputs.population == 24
    assert inputs.risk_level is RiskLevel.HIGH
    assert inputs.frequency is Frequency.BI_WEEKLY
    assert not inputs.is_as_needed


def test_large_population_stays_exact() -> None:
    assert coerce_population(10**400) == 10**400
    assert coerce_population("1" + "0" * 400) == 10**400
    assert coerce_population(" 123456789012345678901234567890 ") == (
        123456789012345678901234567890
    )


@pytest.mark.parametrize("raw", ["1e400", "-" + "9" * 400, -(10**400)])
def test_out_of_range_population(raw) -> None:
    with pytest.raises(SampleSizeError) as exc_info:
        coerce_population(raw)
    assert exc_info.value.kind is ErrorKind.INVALID_POPULATION
