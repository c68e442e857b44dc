"""Audit sampling scripts package.

Contains the validation, table lookup, interpolation and policy
configuration functions behind the sampling strategies.
"""

from .curves import (
    calculate_sample_size_curve,
    policy_table_frame,
)
from .interpolation import (
    calculate_as_needed_sample_size,
    interpolate_sample_size,
)
from .lookup import (
    check_population_for_frequency,
    lookup_policy_sample_size,
)
from .policy import (
    DEFAULT_POLICY,
    SamplingPolicy,
    build_policy,
    load_policy,
    validate_breakpoints,
)
from .validation import (
    validate_inputs,
    validate_parameters,
)

__all__ = [
    # Calculations
    "interpolate_sample_size",
    "calculate_as_needed_sample_size",
    "check_population_for_frequency",
    "lookup_policy_sample_size",
    "validate_inputs",
    "validate_parameters",
    # Policy configuration
    "DEFAULT_POLICY",
    "SamplingPolicy",
    "build_policy",
    "load_policy",
    "validate_breakpoints",
    # Reporting
    "calculate_sample_size_curve",
    "policy_table_frame",
]
