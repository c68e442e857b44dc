import logging
import math
from typing import Sequence, Tuple

from audit_sampling.sampling.types import ErrorKind, RiskLevel, SampleSizeError
from audit_sampling.scripts.policy import DEFAULT_POLICY, SamplingPolicy

logger = logging.getLogger("audit_sampling.scripts.interpolation")


def interpolate_sample_size(
    population: int, breakpoints: Sequence[Tuple[int, int]]
) -> int:
    """Calculate sample size by piecewise-linear interpolation.

    Breakpoints are (population, sample_size) pairs sorted in strictly
    decreasing population order. Between two adjacent breakpoints
    (x1, y1) and (x2, y2) with x2 < population < x1:

    Formula: n = ceil(y1 + (population - x1) * (y2 - y1) / (x2 - x1))

    Rounding up keeps the sample at least as large as the linear estimate.

    Args:
        population: Population size to interpolate for
        breakpoints: Anchor points, largest population first

    Returns:
        Required sample size (rounded up). Populations outside the table
        range take the size of the nearest end breakpoint.

    Raises:
        ValueError: If breakpoints is empty
    """
    if not breakpoints:
        raise ValueError("At least one breakpoint is required for interpolation")

    for breakpoint_population, size in breakpoints:
        if population == breakpoint_population:
            return size

    for (x1, y1), (x2, y2) in zip(breakpoints, breakpoints[1:]):
        if x2 < population < x1:
            return math.ceil(y1 + (population - x1) * (y2 - y1) / (x2 - x1))

    if population > breakpoints[0][0]:
        return breakpoints[0][1]
    return breakpoints[-1][1]


def calculate_as_needed_sample_size(
    population: int,
    risk_level: RiskLevel,
    policy: SamplingPolicy = DEFAULT_POLICY,
) -> int:
    """Calculate sample size for the "As Needed" frequency.

    Populations above the oversized limit get a flat size per risk level;
    smaller ones are interpolated over the risk level's breakpoints.

    Args:
        population: Validated population size
        risk_level: Risk level of the audited process
        policy: Tables to read

    Returns:
        Required sample size

    Raises:
        SampleSizeError: AMBIGUOUS_STANDARD_POPULATION if the population
            equals a standard expected population
    """
    if population in policy.standard_populations:
        raise SampleSizeError(
            ErrorKind.AMBIGUOUS_STANDARD_POPULATION,
            f"Error: Population {population} matches a standard expected "
            "population value. Please select a specific frequency instead of "
            "As Needed.",
        )

    if population > policy.oversized_population:
        sample_size = policy.oversized_sample_size(risk_level)
        logger.debug(
            f"Population {population} above {policy.oversized_population}, "
            f"using oversized size {sample_size} for {risk_level.value}"
        )
        return sample_size

    sample_size = interpolate_sample_size(population, policy.breakpoints(risk_level))
    logger.debug(
        f"Interpolated sample size for population {population} "
        f"({risk_level.value}): {sample_size}"
    )
    return sample_size
