"""Sampling policy configuration.

The policy bundles every static table the calculator reads. ``DEFAULT_POLICY``
is built from :mod:`audit_sampling.scripts.parameter`; alternative policies can
be loaded from a TOML file whose path is given directly or through the
AUDIT_SAMPLING_POLICY_CFG environment variable. Keys missing from the file keep
their default value.

Example file::

    multiple_per_day_threshold = 251

    [policy_table.Quarterly]
    Low = 2

    [breakpoints]
    Low = [[250, 20], [52, 5], [24, 3], [12, 2], [4, 2], [1, 1]]
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import tomli

from audit_sampling.scripts import parameter
from audit_sampling.sampling.types import Frequency, RiskLevel

logger = logging.getLogger("audit_sampling.scripts.policy")

Breakpoints = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class SamplingPolicy:
    """Immutable set of tables driving the sample size calculation."""

    multiple_per_day_threshold: int
    oversized_population: int
    expected_populations: Mapping[Frequency, int]
    policy_table: Mapping[Frequency, Mapping[RiskLevel, int]]
    oversized_sample_sizes: Mapping[RiskLevel, int]
    breakpoint_tables: Mapping[RiskLevel, Breakpoints]

    @property
    def standard_populations(self) -> Tuple[int, ...]:
        """Populations matched exactly by a specific frequency."""
        return tuple(sorted(set(self.expected_populations.values()), reverse=True))

    def expected_population(self, frequency: Frequency) -> int:
        return self.expected_populations[frequency]

    def policy_sample_size(self, frequency: Frequency, risk_level: RiskLevel) -> int:
        return self.policy_table[frequency][risk_level]

    def oversized_sample_size(self, risk_level: RiskLevel) -> int:
        return self.oversized_sample_sizes[risk_level]

    def breakpoints(self, risk_level: RiskLevel) -> Breakpoints:
        return self.breakpoint_tables[risk_level]


DEFAULT_POLICY = SamplingPolicy(
    multiple_per_day_threshold=parameter.multiple_per_day_threshold,
    oversized_population=parameter.oversized_population,
    expected_populations=parameter.expected_populations,
    policy_table=parameter.policy_table,
    oversized_sample_sizes=parameter.oversized_sample_sizes,
    breakpoint_tables=parameter.breakpoint_tables,
)


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def _section(overrides: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = overrides.get(name, {})
    if not isinstance(section, Mapping):
        raise ValueError(f"{name} must be a table, got {section!r}")
    return section


def _risk_mapping(raw: Mapping[str, Any], name: str) -> Dict[RiskLevel, int]:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{name} must be a table keyed by risk level")
    return {
        RiskLevel.from_string(key): _positive_int(value, f"{name}.{key}")
        for key, value in raw.items()
    }


def validate_breakpoints(breakpoints: Any, name: str = "breakpoints") -> Breakpoints:
    """Check a breakpoint table and return it as a tuple of pairs.

    Args:
        breakpoints: Sequence of (population, sample_size) pairs
        name: Label used in error messages

    Returns:
        The breakpoints as a tuple of (int, int) tuples

    Raises:
        ValueError: If the table is empty, malformed, or not strictly
            decreasing in population
    """
    if not isinstance(breakpoints, (list, tuple)):
        raise ValueError(f"{name} must be a list of breakpoints, got {breakpoints!r}")
    if not breakpoints:
        raise ValueError(f"{name} must contain at least one breakpoint")

    pairs = []
    for pair in breakpoints:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"{name} entries must be [population, sample_size] pairs")
        population, size = pair
        pairs.append(
            (
                _positive_int(population, f"{name} population"),
                _positive_int(size, f"{name} sample size"),
            )
        )

    for (x1, _), (x2, _) in zip(pairs, pairs[1:]):
        if x2 >= x1:
            raise ValueError(
                f"{name} must be strictly decreasing in population ({x1} then {x2})"
            )

    return tuple(pairs)


def build_policy(
    overrides: Mapping[str, Any], base: SamplingPolicy = DEFAULT_POLICY
) -> SamplingPolicy:
    """Apply configuration overrides on top of a base policy.

    Args:
        overrides: Parsed configuration (e.g. from a TOML file)
        base: Policy supplying every value not overridden

    Returns:
        A new validated SamplingPolicy

    Raises:
        ValueError: If a key or value is invalid
    """
    known = {
        "multiple_per_day_threshold",
        "oversized_population",
        "expected_populations",
        "policy_table",
        "oversized_sample_sizes",
        "breakpoints",
    }
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown policy keys: {', '.join(sorted(unknown))}")

    threshold = _positive_int(
        overrides.get("multiple_per_day_threshold", base.multiple_per_day_threshold),
        "multiple_per_day_threshold",
    )
    oversized_population = _positive_int(
        overrides.get("oversized_population", base.oversized_population),
        "oversized_population",
    )

    expected = dict(base.expected_populations)
    for key, value in _section(overrides, "expected_populations").items():
        frequency = Frequency.from_string(key)
        if frequency in (Frequency.AS_NEEDED, Frequency.MULTIPLE_PER_DAY):
            raise ValueError(f"{frequency.value} has no expected population")
        expected[frequency] = _positive_int(value, f"expected_populations.{key}")

    table = {frequency: dict(row) for frequency, row in base.policy_table.items()}
    for key, row in _section(overrides, "policy_table").items():
        frequency = Frequency.from_string(key)
        if frequency is Frequency.AS_NEEDED:
            raise ValueError("As Needed sizes come from the breakpoint tables")
        table[frequency].update(_risk_mapping(row, f"policy_table.{key}"))

    oversized = dict(base.oversized_sample_sizes)
    oversized.update(
        _risk_mapping(
            overrides.get("oversized_sample_sizes", {}), "oversized_sample_sizes"
        )
    )

    breakpoints = dict(base.breakpoint_tables)
    for key, value in _section(overrides, "breakpoints").items():
        breakpoints[RiskLevel.from_string(key)] = validate_breakpoints(
            value, f"breakpoints.{key}"
        )

    return SamplingPolicy(
        multiple_per_day_threshold=threshold,
        oversized_population=oversized_population,
        expected_populations=MappingProxyType(expected),
        policy_table=MappingProxyType(
            {frequency: MappingProxyType(row) for frequency, row in table.items()}
        ),
        oversized_sample_sizes=MappingProxyType(oversized),
        breakpoint_tables=MappingProxyType(breakpoints),
    )


def load_policy(cfg_path: Optional[Union[str, Path]] = None) -> SamplingPolicy:
    """Load a sampling policy from a TOML file.

    Args:
        cfg_path: Path to the TOML file. Defaults to the value of the
            AUDIT_SAMPLING_POLICY_CFG environment variable.

    Returns:
        The configured SamplingPolicy, or DEFAULT_POLICY when no file is set

    Raises:
        FileNotFoundError: If the configured path does not exist
        ValueError: If the file contents are invalid
    """
    cfg_path = cfg_path or os.getenv(parameter.policy_cfg_env)
    if not cfg_path:
        return DEFAULT_POLICY

    cfg_path = Path(cfg_path)
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Policy config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        try:
            cfg = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ValueError(f"Invalid policy config {cfg_path}: {e}") from e

    policy = build_policy(cfg)
    logger.info(
        f"Loaded sampling policy from {cfg_path} "
        f"(multiple per day threshold: {policy.multiple_per_day_threshold})"
    )
    return policy
