"""As Needed sampling strategy implementation.

Controls performed as needed have no fixed number of occurrences. Their
sample size is interpolated between the breakpoints of the risk level,
rounding up, with a flat size for very large populations.
"""

from audit_sampling.sampling.base import SamplingStrategy
from audit_sampling.sampling.types import Frequency, SampleSizeInputs
from audit_sampling.scripts.interpolation import calculate_as_needed_sample_size
from audit_sampling.scripts.policy import SamplingPolicy


class AsNeededSamplingStrategy(SamplingStrategy):
    """Strategy for the As Needed frequency.

    As Needed is ideal when:
    - The control has no regular schedule
    - The population does not match any standard frequency
    - The same risk level is reused for a sub-sample of a base sample
    """

    @property
    def display_name(self) -> str:
        return "As Needed Sampling"

    @property
    def description(self) -> str:
        return (
            "Sample size interpolated from the population between standard "
            "breakpoints. Populations that equal a standard value must use the "
            "matching frequency instead."
        )

    def supports(self, frequency: Frequency) -> bool:
        return frequency is Frequency.AS_NEEDED

    def sample_size(self, inputs: SampleSizeInputs, policy: SamplingPolicy) -> int:
        return calculate_as_needed_sample_size(
            inputs.population, inputs.risk_level, policy
        )
