# File containing the shared sampling policy parameters
from types import MappingProxyType

from audit_sampling.sampling.types import Frequency, RiskLevel

LOW = RiskLevel.LOW
MEDIUM = RiskLevel.MEDIUM
HIGH = RiskLevel.HIGH

# Populations above this value may only use "Multiple per day" or the
# oversized As Needed sizes
multiple_per_day_threshold = 250

expected_populations = MappingProxyType(
    {
        Frequency.DAILY: 250,
        Frequency.WEEKLY: 52,
        Frequency.BI_WEEKLY: 24,
        Frequency.MONTHLY: 12,
        Frequency.QUARTERLY: 4,
        Frequency.ANNUALLY: 1,
    }
)

# As Needed populations above this value use the flat oversized sizes
oversized_population = 250

policy_table = MappingProxyType(
    {
        Frequency.MULTIPLE_PER_DAY: MappingProxyType({LOW: 30, MEDIUM: 45, HIGH: 60}),
        Frequency.DAILY: MappingProxyType({LOW: 20, MEDIUM: 25, HIGH: 30}),
        Frequency.WEEKLY: MappingProxyType({LOW: 5, MEDIUM: 8, HIGH: 10}),
        Frequency.BI_WEEKLY: MappingProxyType({LOW: 3, MEDIUM: 6, HIGH: 8}),
        Frequency.MONTHLY: MappingProxyType({LOW: 2, MEDIUM: 3, HIGH: 5}),
        Frequency.QUARTERLY: MappingProxyType({LOW: 1, MEDIUM: 2, HIGH: 2}),
        Frequency.ANNUALLY: MappingProxyType({LOW: 1, MEDIUM: 1, HIGH: 1}),
    }
)

oversized_sample_sizes = MappingProxyType({LOW: 30, MEDIUM: 45, HIGH: 60})

# (population, sample_size) pairs, strictly decreasing in population
breakpoint_tables = MappingProxyType(
    {
        LOW: ((250, 20), (52, 5), (24, 3), (12, 2), (4, 1), (1, 1)),
        MEDIUM: ((250, 25), (52, 8), (24, 6), (12, 3), (4, 2), (1, 1)),
        HIGH: ((250, 30), (52, 10), (24, 8), (12, 5), (4, 2), (1, 1)),
    }
)

# Environment variables pointing to TOML configuration files
policy_cfg_env = "AUDIT_SAMPLING_POLICY_CFG"
log_cfg_env = "AUDIT_SAMPLING_LOG_CFG"
