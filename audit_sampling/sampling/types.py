"""Type definitions for audit sample size calculations.

Contains the enums, data classes and the error type shared by the validator,
the policy table lookup and the As Needed interpolator. This provides a clear
contract between the host caller and the calculation logic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class RiskLevel(Enum):
    """Qualitative risk assessment of the audited process."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_string(cls, value: str) -> "RiskLevel":
        """Convert string to RiskLevel enum."""
        for level in cls:
            if level.value.lower() == value.strip().lower():
                return level
        raise ValueError(f"Unknown risk level: {value}")


class Frequency(Enum):
    """How often the sampled control or process recurs."""

    AS_NEEDED = "As Needed"
    MULTIPLE_PER_DAY = "Multiple per day"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    BI_WEEKLY = "Bi-Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    ANNUALLY = "Annually"

    @classmethod
    def from_string(cls, value: str) -> "Frequency":
        """Convert string to Frequency enum."""
        for frequency in cls:
            if frequency.value.lower() == value.strip().lower():
                return frequency
        raise ValueError(f"Unknown frequency: {value}")


class ErrorKind(Enum):
    """Reasons a sample size could not be produced."""

    INVALID_POPULATION = "InvalidPopulation"
    INVALID_RISK_LEVEL = "InvalidRiskLevel"
    INVALID_FREQUENCY = "InvalidFrequency"
    AMBIGUOUS_STANDARD_POPULATION = "AmbiguousStandardPopulation"
    POPULATION_MISMATCH = "PopulationMismatch"


class SampleSizeError(ValueError):
    """Raised when inputs cannot produce a sample size.

    Args:
        kind: Category of the failure
        message: Human-readable message shown to the caller
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class SampleSizeInputs:
    """Validated input parameters for a sample size calculation."""

    population: int
    risk_level: RiskLevel
    frequency: Frequency

    @property
    def is_as_needed(self) -> bool:
        return self.frequency is Frequency.AS_NEEDED


@dataclass(frozen=True)
class SampleSizeResult:
    """Result of a sample size calculation.

    Either ``success`` is True and ``sample_size`` holds the computed size, or
    ``success`` is False, ``sample_size`` is 0 and ``error_kind`` and
    ``error_message`` describe the failure.
    """

    success: bool
    sample_size: int
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    frequency: Optional[Frequency] = None
    risk_level: Optional[RiskLevel] = None

    def __post_init__(self):
        if self.success:
            if self.sample_size < 1 or self.error_kind is not None:
                raise ValueError("A successful result needs a positive sample size")
        elif self.sample_size != 0 or self.error_kind is None:
            raise ValueError("A failed result needs an error kind and no sample size")

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a plain dictionary for host callers."""
        return {
            "success": self.success,
            "sample_size": self.sample_size,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error": self.error_message or "",
            "frequency": self.frequency.value if self.frequency else None,
            "risk_level": self.risk_level.value if self.risk_level else None,
        }

    @classmethod
    def ok(
        cls,
        sample_size: int,
        frequency: Optional[Frequency] = None,
        risk_level: Optional[RiskLevel] = None,
    ) -> "SampleSizeResult":
        """Create a successful result."""
        return cls(
            success=True,
            sample_size=sample_size,
            frequency=frequency,
            risk_level=risk_level,
        )

    @classmethod
    def error(
        cls,
        kind: ErrorKind,
        message: str,
        frequency: Optional[Frequency] = None,
        risk_level: Optional[RiskLevel] = None,
    ) -> "SampleSizeResult":
        """Create an error result."""
        return cls(
            success=False,
            sample_size=0,
            error_kind=kind,
            error_message=message,
            frequency=frequency,
            risk_level=risk_level,
        )

    @classmethod
    def from_exception(
        cls, exc: SampleSizeError, inputs: Optional[SampleSizeInputs] = None
    ) -> "SampleSizeResult":
        """Create an error result from a raised SampleSizeError."""
        return cls.error(
            exc.kind,
            exc.message,
            frequency=inputs.frequency if inputs else None,
            risk_level=inputs.risk_level if inputs else None,
        )
