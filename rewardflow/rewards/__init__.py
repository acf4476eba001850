"""Reward savings processing module."""
from .models import (
    CATEGORIES,
    Card,
    MonthlySavingsRecord,
    RewardRule,
    RewardType,
    Transaction,
)
from .aggregator import SavingsAggregator, aggregate
from .loader import load_cards, load_dataset, load_transactions

__all__ = [
    "CATEGORIES",
    "Card",
    "MonthlySavingsRecord",
    "RewardRule",
    "RewardType",
    "Transaction",
    "SavingsAggregator",
    "aggregate",
    "load_cards",
    "load_dataset",
    "load_transactions",
]
