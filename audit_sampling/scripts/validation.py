"""Input validation for sample size calculations.

Host callers hand over loosely typed values (numbers as strings, display names
for enums). These helpers turn them into typed values or raise a
SampleSizeError naming the first invalid input. The order is fixed:
population, then risk level, then frequency.
"""

import math
from numbers import Integral, Real
from typing import Any, List

from audit_sampling.sampling.types import (
    ErrorKind,
    Frequency,
    RiskLevel,
    SampleSizeError,
    SampleSizeInputs,
)

INVALID_POPULATION_MESSAGE = "Please enter a valid population (minimum 1)"
INVALID_RISK_LEVEL_MESSAGE = "Please select a valid risk level (Low, Medium, or High)"
INVALID_FREQUENCY_MESSAGE = "Please select a valid frequency"


def coerce_population(value: Any, message: str = INVALID_POPULATION_MESSAGE) -> int:
    """Convert a raw population to a positive integer.

    Accepts ints, integral floats and numeric strings.

    Raises:
        SampleSizeError: INVALID_POPULATION if the value is not a whole
            number of at least 1
    """
    if isinstance(value, bool):
        raise SampleSizeError(ErrorKind.INVALID_POPULATION, message)

    if isinstance(value, str):
        value = value.strip()
        try:
            value = int(value)
        except ValueError:
            try:
                value = float(value)
            except ValueError:
                raise SampleSizeError(ErrorKind.INVALID_POPULATION, message) from None

    if isinstance(value, Integral):
        if value < 1:
            raise SampleSizeError(ErrorKind.INVALID_POPULATION, message)
        return int(value)

    if not isinstance(value, Real) or not math.isfinite(value):
        raise SampleSizeError(ErrorKind.INVALID_POPULATION, message)
    if value != int(value) or value < 1:
        raise SampleSizeError(ErrorKind.INVALID_POPULATION, message)

    return int(value)


def coerce_risk_level(
    value: Any, message: str = INVALID_RISK_LEVEL_MESSAGE
) -> RiskLevel:
    """Convert a raw risk level (enum or display name) to RiskLevel."""
    if isinstance(value, RiskLevel):
        return value
    if isinstance(value, str):
        try:
            return RiskLevel.from_string(value)
        except ValueError:
            pass
    raise SampleSizeError(ErrorKind.INVALID_RISK_LEVEL, message)


def coerce_frequency(
    value: Any, message: str = INVALID_FREQUENCY_MESSAGE
) -> Frequency:
    """Convert a raw frequency (enum or display name) to Frequency."""
    if isinstance(value, Frequency):
        return value
    if isinstance(value, str):
        try:
            return Frequency.from_string(value)
        except ValueError:
            pass
    raise SampleSizeError(ErrorKind.INVALID_FREQUENCY, message)


def validate_inputs(
    population: Any, risk_level: Any, frequency: Any
) -> SampleSizeInputs:
    """Validate raw inputs and return typed SampleSizeInputs.

    Raises:
        SampleSizeError: For the first invalid input, checked in the order
            population, risk level, frequency
    """
    return SampleSizeInputs(
        population=coerce_population(population),
        risk_level=coerce_risk_level(risk_level),
        frequency=coerce_frequency(frequency),
    )


def validate_parameters(population: Any, risk_level: Any, frequency: Any) -> List[str]:
    """Validate input parameters and return list of errors.

    Unlike validate_inputs this reports every invalid input, which suits
    form-style callers that show all problems at once.
    """
    errors = []
    for coerce, value in (
        (coerce_population, population),
        (coerce_risk_level, risk_level),
        (coerce_frequency, frequency),
    ):
        try:
            coerce(value)
        except SampleSizeError as e:
            errors.append(e.message)
    return errors
