"""Sampling service for orchestrating sample size calculations.

This module provides the main entry points for host callers: the
``calculate`` function and the ``SamplingService`` adapters that return the
plain dictionaries expected by automation flows (base sample and sub-sample).
"""

import logging
from typing import Any, Dict, List, Optional, Type

from audit_sampling.sampling.as_needed import AsNeededSamplingStrategy
from audit_sampling.sampling.base import SamplingStrategy
from audit_sampling.sampling.fixed import FixedFrequencySamplingStrategy
from audit_sampling.sampling.types import (
    ErrorKind,
    Frequency,
    SampleSizeError,
    SampleSizeInputs,
    SampleSizeResult,
)
from audit_sampling.scripts.policy import SamplingPolicy
from audit_sampling.scripts.validation import (
    coerce_frequency,
    coerce_population,
    coerce_risk_level,
    validate_inputs,
    validate_parameters,
)

logger = logging.getLogger("audit_sampling.sampling.service")

SUB_POPULATION_MESSAGE = "Please enter a valid sub-population (minimum 1)"
SUB_RISK_LEVEL_MESSAGE = "Please complete Part 1 first (Risk Level required)"
SUB_FREQUENCY_MESSAGE = "Sub-sampling frequency must be 'As Needed'"

# Registry of available strategies
_STRATEGY_REGISTRY: Dict[Frequency, Type[SamplingStrategy]] = {
    frequency: (
        AsNeededSamplingStrategy
        if frequency is Frequency.AS_NEEDED
        else FixedFrequencySamplingStrategy
    )
    for frequency in Frequency
}

# Cached strategy instances
_strategy_instances: Dict[Type[SamplingStrategy], SamplingStrategy] = {}


def get_sampling_strategy(frequency: Frequency) -> SamplingStrategy:
    """Get the sampling strategy for a given frequency.

    Args:
        frequency: The inspection frequency

    Returns:
        The corresponding SamplingStrategy instance

    Raises:
        ValueError: If the frequency is not supported
    """
    if frequency not in _STRATEGY_REGISTRY:
        raise ValueError(f"Unsupported frequency: {frequency}")

    strategy_cls = _STRATEGY_REGISTRY[frequency]
    if strategy_cls not in _strategy_instances:
        _strategy_instances[strategy_cls] = strategy_cls()

    return _strategy_instances[strategy_cls]


def calculate(
    population: Any,
    risk_level: Any,
    frequency: Any,
    policy: Optional[SamplingPolicy] = None,
) -> SampleSizeResult:
    """Calculate the audit sample size.

    Inputs are validated in the order population, risk level, frequency and
    the first invalid one produces an error result. Valid inputs are routed
    to the policy table lookup or, for As Needed, to the interpolation.

    Args:
        population: Population size (int, integral float or numeric string)
        risk_level: RiskLevel or its name ("Low", "Medium", "High")
        frequency: Frequency or its name (e.g. "Weekly", "As Needed")
        policy: Tables to read. Defaults to DEFAULT_POLICY.

    Returns:
        SampleSizeResult with either the sample size or the error
    """
    try:
        inputs = validate_inputs(population, risk_level, frequency)
    except SampleSizeError as e:
        logger.info(
            f"Rejected inputs (population={population!r}, risk_level={risk_level!r}, "
            f"frequency={frequency!r}): {e.message}"
        )
        return SampleSizeResult.from_exception(e)

    return SamplingService.calculate(inputs, policy)


class SamplingService:
    """High-level service for sample size calculations.

    This service provides a simplified interface for automation callers,
    handling the conversion between raw values and typed inputs and the
    shape of the returned payloads.
    """

    @staticmethod
    def create_inputs(
        population: Any, risk_level: Any, frequency: Any
    ) -> SampleSizeInputs:
        """Create SampleSizeInputs from raw values.

        Raises:
            SampleSizeError: For the first invalid input
        """
        return validate_inputs(population, risk_level, frequency)

    @staticmethod
    def calculate(
        inputs: SampleSizeInputs, policy: Optional[SamplingPolicy] = None
    ) -> SampleSizeResult:
        """Calculate sample size using the appropriate strategy.

        Args:
            inputs: Validated sample size inputs
            policy: Tables to read. Defaults to DEFAULT_POLICY.

        Returns:
            SampleSizeResult from the calculation
        """
        strategy = get_sampling_strategy(inputs.frequency)
        result = strategy.calculate(inputs, policy)
        if result.success:
            logger.debug(
                f"{strategy.display_name}: population {inputs.population}, "
                f"{inputs.risk_level.value}, {inputs.frequency.value} "
                f"-> {result.sample_size}"
            )
        return result

    @staticmethod
    def calculate_base_sample(
        population: Any,
        risk_level: Any,
        frequency: Any,
        policy: Optional[SamplingPolicy] = None,
    ) -> Dict[str, Any]:
        """Calculate the base sample (Part 1) for an automation flow.

        Returns:
            Dictionary with baseSampleSize (0 on error) and error (empty
            string on success)
        """
        result = calculate(population, risk_level, frequency, policy)
        return {
            "baseSampleSize": result.sample_size,
            "error": result.error_message or "",
        }

    @staticmethod
    def calculate_sub_sample(
        sub_population: Any,
        risk_level: Any,
        frequency: Any = Frequency.AS_NEEDED.value,
        policy: Optional[SamplingPolicy] = None,
    ) -> Dict[str, Any]:
        """Calculate the sub-sample (Part 2) for an automation flow.

        The sub-sample reuses the risk level of Part 1 and is always
        calculated with the As Needed frequency.

        Returns:
            Dictionary with subSampleSize (0 on error) and error (empty
            string on success)
        """
        try:
            inputs = SampleSizeInputs(
                population=coerce_population(sub_population, SUB_POPULATION_MESSAGE),
                risk_level=coerce_risk_level(risk_level, SUB_RISK_LEVEL_MESSAGE),
                frequency=coerce_frequency(frequency, SUB_FREQUENCY_MESSAGE),
            )
            if not inputs.is_as_needed:
                raise SampleSizeError(
                    ErrorKind.INVALID_FREQUENCY, SUB_FREQUENCY_MESSAGE
                )
        except SampleSizeError as e:
            logger.info(f"Rejected sub-sample inputs: {e.message}")
            return {"subSampleSize": 0, "error": e.message}

        result = SamplingService.calculate(inputs, policy)
        return {
            "subSampleSize": result.sample_size,
            "error": result.error_message or "",
        }

    @staticmethod
    def get_validation_errors(
        population: Any, risk_level: Any, frequency: Any
    ) -> List[str]:
        """Get every validation error for the raw inputs.

        Returns:
            List of validation error messages (empty if valid)
        """
        return validate_parameters(population, risk_level, frequency)

    @staticmethod
    def get_available_frequencies() -> list:
        """Get list of available frequencies.

        Returns:
            List of (frequency_value, display_name, description) tuples
        """
        frequencies = []
        for frequency in Frequency:
            strategy = get_sampling_strategy(frequency)
            frequencies.append(
                (frequency.value, strategy.display_name, strategy.description)
            )
        return frequencies
