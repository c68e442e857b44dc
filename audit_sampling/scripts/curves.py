from typing import Optional

import numpy as np
import pandas as pd

from audit_sampling.sampling.types import Frequency, RiskLevel
from audit_sampling.scripts.interpolation import interpolate_sample_size
from audit_sampling.scripts.policy import DEFAULT_POLICY, SamplingPolicy


def _frequency_for_population(population: int, policy: SamplingPolicy) -> Frequency:
    for frequency, expected in policy.expected_populations.items():
        if expected == population:
            return frequency
    raise KeyError(population)


def calculate_sample_size_curve(
    risk_level: RiskLevel,
    min_population: int = 1,
    max_population: Optional[int] = None,
    policy: Optional[SamplingPolicy] = None,
) -> pd.DataFrame:
    """Calculate the sample size for every population in a range.

    Shows how the required sample grows with the population for one risk
    level. Standard populations report the size of the frequency they belong
    to, breakpoints their anchor size and every other population the
    interpolated (or oversized) As Needed size.

    Args:
        risk_level: Risk level of the audited process
        min_population: First population in the curve (at least 1)
        max_population: Last population in the curve. Defaults to the
            oversized population limit of the policy.
        policy: Tables to read. Defaults to DEFAULT_POLICY.

    Returns:
        DataFrame with columns: population, sample_size, method

    Raises:
        ValueError: If the population range is empty or starts below 1
    """
    policy = policy or DEFAULT_POLICY
    if max_population is None:
        max_population = policy.oversized_population

    if min_population < 1:
        raise ValueError("Minimum population must be at least 1")
    if max_population < min_population:
        raise ValueError("Maximum population must not be below minimum population")

    populations = np.arange(min_population, max_population + 1)
    breakpoint_populations = {x for x, _ in policy.breakpoints(risk_level)}
    standard = set(policy.standard_populations)

    sample_sizes = []
    methods = []
    for population in populations.tolist():
        if population in standard:
            frequency = _frequency_for_population(population, policy)
            sample_sizes.append(policy.policy_sample_size(frequency, risk_level))
            methods.append("standard")
        elif population > policy.oversized_population:
            sample_sizes.append(policy.oversized_sample_size(risk_level))
            methods.append("oversized")
        else:
            sample_sizes.append(
                interpolate_sample_size(population, policy.breakpoints(risk_level))
            )
            methods.append(
                "breakpoint" if population in breakpoint_populations else "interpolated"
            )

    curve_df = pd.DataFrame(
        {
            "population": populations,
            "sample_size": sample_sizes,
            "method": methods,
        }
    )

    return curve_df


def policy_table_frame(policy: Optional[SamplingPolicy] = None) -> pd.DataFrame:
    """Build the fixed policy table as a DataFrame.

    Args:
        policy: Tables to read. Defaults to DEFAULT_POLICY.

    Returns:
        DataFrame indexed by frequency name with one column per risk level
        and an expected_population column (NaN for "Multiple per day")
    """
    policy = policy or DEFAULT_POLICY

    rows = []
    for frequency, sizes in policy.policy_table.items():
        row = {"frequency": frequency.value}
        row.update({level.value: sizes[level] for level in RiskLevel})
        row["expected_population"] = policy.expected_populations.get(frequency, np.nan)
        rows.append(row)

    return pd.DataFrame(rows).set_index("frequency")
