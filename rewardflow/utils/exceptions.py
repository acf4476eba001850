"""Custom exception classes for RewardFlow."""


class RewardFlowError(Exception):
    """Base exception for RewardFlow."""
    pass


class ConfigError(RewardFlowError):
    """Configuration-related errors."""
    pass


class RewardRuleError(ConfigError):
    """Card reward rule is unusable (no default rate, unknown type)."""
    pass


class ValidationError(RewardFlowError):
    """Data validation errors."""
    pass
