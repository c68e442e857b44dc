"""Base class for sampling strategies.

Defines the interface that all sampling strategies must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from audit_sampling.sampling.types import (
    Frequency,
    SampleSizeError,
    SampleSizeInputs,
    SampleSizeResult,
)
from audit_sampling.scripts.policy import DEFAULT_POLICY, SamplingPolicy

logger = logging.getLogger("audit_sampling.sampling")


class SamplingStrategy(ABC):
    """Abstract base class for sampling strategies.

    Each calculation path (policy table lookup, As Needed interpolation)
    implements this interface. Strategies hold no state, so a single
    instance can serve any number of callers.
    """

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for this sampling path."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of when this sampling path applies."""
        pass

    @abstractmethod
    def supports(self, frequency: Frequency) -> bool:
        """Whether this strategy handles the given frequency."""
        pass

    @abstractmethod
    def sample_size(self, inputs: SampleSizeInputs, policy: SamplingPolicy) -> int:
        """Compute the sample size for validated inputs.

        Args:
            inputs: Validated sample size inputs
            policy: Tables to read

        Returns:
            Required sample size

        Raises:
            SampleSizeError: If the population does not fit this path
        """
        pass

    def calculate(
        self, inputs: SampleSizeInputs, policy: Optional[SamplingPolicy] = None
    ) -> SampleSizeResult:
        """Calculate the sample size and wrap it in a result.

        Args:
            inputs: Validated sample size inputs
            policy: Tables to read. Defaults to DEFAULT_POLICY.

        Returns:
            SampleSizeResult with the sample size or the error
        """
        if not self.supports(inputs.frequency):
            raise ValueError(
                f"{self.display_name} does not handle frequency "
                f"{inputs.frequency.value}"
            )

        try:
            sample_size = self.sample_size(inputs, policy or DEFAULT_POLICY)
        except SampleSizeError as e:
            logger.info(f"{self.display_name} rejected inputs {inputs}: {e.message}")
            return SampleSizeResult.from_exception(e, inputs)

        return SampleSizeResult.ok(
            sample_size, frequency=inputs.frequency, risk_level=inputs.risk_level
        )
