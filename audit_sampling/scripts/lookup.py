import logging

from audit_sampling.sampling.types import (
    ErrorKind,
    Frequency,
    RiskLevel,
    SampleSizeError,
)
from audit_sampling.scripts.policy import DEFAULT_POLICY, SamplingPolicy

logger = logging.getLogger("audit_sampling.scripts.lookup")


def check_population_for_frequency(
    population: int, frequency: Frequency, policy: SamplingPolicy = DEFAULT_POLICY
) -> None:
    """Check that a population is valid for a specific (non As Needed) frequency.

    "Multiple per day" requires a population strictly above the policy
    threshold; every other frequency requires its exact expected population.

    Raises:
        SampleSizeError: POPULATION_MISMATCH if the population does not fit
        ValueError: If called with As Needed, which has no expected population
    """
    if frequency is Frequency.AS_NEEDED:
        raise ValueError("As Needed has no expected population")

    if frequency is Frequency.MULTIPLE_PER_DAY:
        threshold = policy.multiple_per_day_threshold
        if population <= threshold:
            raise SampleSizeError(
                ErrorKind.POPULATION_MISMATCH,
                f"Error: '{frequency.value}' requires population > {threshold}. "
                f"Current: {population}",
            )
        return

    expected = policy.expected_population(frequency)
    if population != expected:
        raise SampleSizeError(
            ErrorKind.POPULATION_MISMATCH,
            f"Error: Population {population} is not valid for frequency "
            f"'{frequency.value}'. Expected population: {expected}",
        )


def lookup_policy_sample_size(
    population: int,
    frequency: Frequency,
    risk_level: RiskLevel,
    policy: SamplingPolicy = DEFAULT_POLICY,
) -> int:
    """Resolve the fixed sample size for a specific frequency.

    Args:
        population: Validated population size
        frequency: Any frequency except As Needed
        risk_level: Risk level of the audited process
        policy: Tables to read

    Returns:
        Sample size from the policy table

    Raises:
        SampleSizeError: POPULATION_MISMATCH if the population does not fit
            the frequency
    """
    check_population_for_frequency(population, frequency, policy)
    sample_size = policy.policy_sample_size(frequency, risk_level)
    logger.debug(
        f"Policy table lookup: {frequency.value}/{risk_level.value} -> {sample_size}"
    )
    return sample_size
