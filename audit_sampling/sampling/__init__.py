"""Sampling strategies module.

Each calculation path is implemented as a Strategy class that handles
sample size calculation and result formatting for the frequencies it
supports:
- FixedFrequencySamplingStrategy: policy table lookup
- AsNeededSamplingStrategy: breakpoint interpolation

Usage:
    from audit_sampling.sampling import calculate, Frequency, RiskLevel

    result = calculate(52, RiskLevel.MEDIUM, Frequency.WEEKLY)
    if result.success:
        print(result.sample_size)
"""

from audit_sampling.sampling.base import SamplingStrategy
from audit_sampling.sampling.service import (
    SamplingService,
    calculate,
    get_sampling_strategy,
)
from audit_sampling.sampling.types import (
    ErrorKind,
    Frequency,
    RiskLevel,
    SampleSizeError,
    SampleSizeInputs,
    SampleSizeResult,
)

__all__ = [
    "SamplingStrategy",
    "SamplingService",
    "calculate",
    "get_sampling_strategy",
    "ErrorKind",
    "Frequency",
    "RiskLevel",
    "SampleSizeError",
    "SampleSizeInputs",
    "SampleSizeResult",
]
