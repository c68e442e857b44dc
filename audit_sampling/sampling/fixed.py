"""Fixed frequency sampling strategy implementation.

Controls that recur on a known schedule (daily, weekly, ...) have a known
population, so the sample size is read straight from the policy table once
the population has been checked against the frequency.
"""

from audit_sampling.sampling.base import SamplingStrategy
from audit_sampling.sampling.types import Frequency, SampleSizeInputs
from audit_sampling.scripts.lookup import lookup_policy_sample_size
from audit_sampling.scripts.policy import SamplingPolicy


class FixedFrequencySamplingStrategy(SamplingStrategy):
    """Strategy for every frequency except As Needed."""

    @property
    def display_name(self) -> str:
        return "Fixed Frequency Sampling"

    @property
    def description(self) -> str:
        return (
            "Sample size taken from the policy table. The population must match "
            "the number of occurrences expected for the selected frequency."
        )

    def supports(self, frequency: Frequency) -> bool:
        return frequency is not Frequency.AS_NEEDED

    def sample_size(self, inputs: SampleSizeInputs, policy: SamplingPolicy) -> int:
        return lookup_policy_sample_size(
            inputs.population, inputs.frequency, inputs.risk_level, policy
        )
