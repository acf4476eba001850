"""Data models for reward savings processing."""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Union

DEFAULT_RATE_KEY = "default"

# Spend categories known to the bank feeds
CATEGORIES = ("Groceries", "Dining", "Travel", "Gas", "Other")


class RewardType(str, Enum):
    """How a card's reward rate is applied to spend."""
    CASHBACK = "cashback"  # rate is a fraction of spend
    POINTS = "points"  # rate is a points multiplier


@dataclass
class RewardRule:
    """Reward policy of a card."""
    type: RewardType
    rates: Dict[str, Decimal]  # category -> rate, plus "default"


@dataclass
class Card:
    """Funding card with its reward policy."""
    id: str
    rewards: RewardRule
    name: str = ""


@dataclass
class Transaction:
    """Transaction data."""
    id: str
    date: date
    amount: Decimal
    category: str
    card_id: str
    description: str = ""


@dataclass
class MonthlySavingsRecord:
    """Savings per tracked category for one calendar month."""
    month: str  # "Jan".."Dec"
    savings: Dict[str, Decimal] = field(default_factory=dict)

    def to_chart_row(self) -> Dict[str, Union[str, float]]:
        """Flatten into the row shape the stacked bar chart consumes."""
        row: Dict[str, Union[str, float]] = {"month": self.month}
        for category, value in self.savings.items():
            row[category] = float(value)
        return row
