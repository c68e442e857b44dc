import pytest

from audit_sampling.sampling.types import (
    ErrorKind,
    Frequency,
    RiskLevel,
    SampleSizeError,
    SampleSizeInputs,
    SampleSizeResult,
)


def test_enum_from_string_is_case_insensitive() -> None:
    assert RiskLevel.from_string("high") is RiskLevel.HIGH
    assert Frequency.from_string(" multiple per day ") is Frequency.MULTIPLE_PER_DAY
    assert Frequency.from_string("Bi-Weekly") is Frequency.BI_WEEKLY


def test_enum_from_string_unknown_value() -> None:
    with pytest.raises(ValueError):
        RiskLevel.from_string("Critical")
    with pytest.raises(ValueError):
        Frequency.from_string("Biweekly")


def test_result_to_dict() -> None:
    result = SampleSizeResult.ok(8, Frequency.WEEKLY, RiskLevel.MEDIUM)
    assert result.to_dict() == {
        "success": True,
        "sample_size": 8,
        "error_kind": None,
        "error": "",
        "frequency": "Weekly",
        "risk_level": "Medium",
    }


def test_error_result_from_exception() -> None:
    inputs = SampleSizeInputs(51, RiskLevel.LOW, Frequency.WEEKLY)
    exc = SampleSizeError(ErrorKind.POPULATION_MISMATCH, "mismatch")
    result = SampleSizeResult.from_exception(exc, inputs)
    assert not result.success
    assert result.sample_size == 0
    assert result.to_dict()["error_kind"] == "PopulationMismatch"
    assert result.to_dict()["error"] == "mismatch"
    assert result.frequency is Frequency.WEEKLY


def test_sample_size_error_is_value_error() -> None:
    exc = SampleSizeError(ErrorKind.INVALID_POPULATION, "bad population")
    assert isinstance(exc, ValueError)
    assert str(exc) == "bad population"
    assert exc.kind is ErrorKind.INVALID_POPULATION


def test_result_requires_explicit_outcome() -> None:
    with pytest.raises(TypeError):
        SampleSizeResult()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"success": True, "sample_size": 0},
        {
            "success": True,
            "sample_size": 5,
            "error_kind": ErrorKind.POPULATION_MISMATCH,
        },
        {"success": False, "sample_size": 0},
        {
            "success": False,
            "sample_size": 5,
            "error_kind": ErrorKind.POPULATION_MISMATCH,
        },
    ],
)
def test_result_rejects_inconsistent_state(kwargs) -> None:
    with pytest.raises(ValueError):
        SampleSizeResult(**kwargs)
