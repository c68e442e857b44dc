# audit_sampling/__init__.py

from .sampling import (
    ErrorKind,
    Frequency,
    RiskLevel,
    SampleSizeError,
    SampleSizeResult,
    SamplingService,
    calculate,
)
from .scripts.logger import install_null_handler, setup_logging
from .scripts.policy import DEFAULT_POLICY, SamplingPolicy, load_policy

__version__ = "0.1.0"

install_null_handler()

__all__ = [
    "calculate",
    "SamplingService",
    "ErrorKind",
    "Frequency",
    "RiskLevel",
    "SampleSizeError",
    "SampleSizeResult",
    "DEFAULT_POLICY",
    "SamplingPolicy",
    "load_policy",
    "setup_logging",
]
