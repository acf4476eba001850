"""Utility modules."""
from .logger import get_logger, configure_logging, set_account_context
from .exceptions import (
    RewardFlowError,
    ConfigError,
    RewardRuleError,
    ValidationError
)

__all__ = [
    "get_logger",
    "configure_logging",
    "set_account_context",
    "RewardFlowError",
    "ConfigError",
    "RewardRuleError",
    "ValidationError"
]
