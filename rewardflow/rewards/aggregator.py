"""Monthly reward savings aggregation."""
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .models import (
    DEFAULT_RATE_KEY,
    Card,
    MonthlySavingsRecord,
    RewardType,
    Transaction,
)
from rewardflow.config.settings import AppSettings, get_settings
from rewardflow.utils.logger import get_logger
from rewardflow.utils.exceptions import RewardRuleError, ValidationError

logger = get_logger()

POINT_TO_CURRENCY_RATE = Decimal("0.01")

# Fixed English labels so output never depends on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_ORDER = {name: index for index, name in enumerate(MONTH_ABBREVIATIONS)}


def month_label(value: date) -> str:
    """Three-letter English month abbreviation for a date."""
    return MONTH_ABBREVIATIONS[value.month - 1]


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class SavingsAggregator:
    """Aggregates reward savings by month and category."""

    def __init__(self, point_to_currency_rate: Decimal = POINT_TO_CURRENCY_RATE,
                 zero_rate_falls_back: bool = False):
        """
        Initialize aggregator.

        Args:
            point_to_currency_rate: Currency value of one reward point
            zero_rate_falls_back: Treat an explicit 0 rate like a missing one
                and use the card's default rate instead
        """
        self.point_to_currency_rate = _to_decimal(point_to_currency_rate)
        self.zero_rate_falls_back = zero_rate_falls_back

    @classmethod
    def from_settings(cls, settings: Optional[AppSettings] = None) -> "SavingsAggregator":
        """Build an aggregator from application settings."""
        settings = settings or get_settings()
        return cls(
            point_to_currency_rate=settings.point_to_currency_rate,
            zero_rate_falls_back=settings.zero_rate_falls_back
        )

    def aggregate(
        self,
        transactions: Iterable[Transaction],
        cards: Mapping[str, Card],
        tracked_categories: Sequence[str]
    ) -> List[MonthlySavingsRecord]:
        """
        Aggregate transaction rewards into monthly savings records.

        Transactions whose card is not in ``cards`` are skipped. Months are
        bucketed without a year, so the same month of different years merges.

        Args:
            transactions: Transactions to process
            cards: Card catalog keyed by card id
            tracked_categories: Output categories, in output order

        Returns:
            One record per month seen, ordered January to December

        Raises:
            ValidationError: A transaction date is not a calendar date
            RewardRuleError: A referenced card has no default rate or an
                unknown reward type
        """
        buckets: Dict[str, Dict[str, Decimal]] = defaultdict(lambda: defaultdict(Decimal))
        processed = 0
        skipped = 0

        for txn in transactions:
            if not isinstance(txn.date, date):
                raise ValidationError(
                    f"Transaction {txn.id} has invalid date: {txn.date!r}"
                )

            card = cards.get(txn.card_id)
            if card is None:
                logger.debug(f"Skipping transaction {txn.id}: unknown card {txn.card_id}")
                skipped += 1
                continue

            savings = self.calculate_savings(txn, card)
            buckets[month_label(txn.date)][txn.category] += savings
            processed += 1

        records = []
        for month in sorted(buckets, key=MONTH_ORDER.__getitem__):
            month_totals = buckets[month]
            records.append(MonthlySavingsRecord(
                month=month,
                savings={
                    category: month_totals.get(category, Decimal("0"))
                    for category in tracked_categories
                }
            ))

        logger.info(
            f"Aggregated {processed} transactions into {len(records)} months "
            f"({skipped} skipped for unknown cards)"
        )

        return records

    def calculate_savings(self, txn: Transaction, card: Card) -> Decimal:
        """Currency value of the reward a transaction earns on a card."""
        rate = self.resolve_rate(card, txn.category)
        amount = _to_decimal(txn.amount)
        reward_type = card.rewards.type

        if reward_type == RewardType.CASHBACK:
            return amount * rate
        if reward_type == RewardType.POINTS:
            points = amount * rate
            return points * self.point_to_currency_rate

        raise RewardRuleError(f"Card {card.id} has unknown reward type: {reward_type!r}")

    def resolve_rate(self, card: Card, category: str) -> Decimal:
        """
        Reward rate of a card for a category.

        Falls back to the card's default rate when the category has no entry,
        and also when the entry is 0 if ``zero_rate_falls_back`` is set.
        """
        rates = card.rewards.rates
        if DEFAULT_RATE_KEY not in rates:
            raise RewardRuleError(f"Card {card.id} reward rule has no '{DEFAULT_RATE_KEY}' rate")

        rate = rates.get(category)
        if rate is None or (self.zero_rate_falls_back and not rate):
            rate = rates[DEFAULT_RATE_KEY]
        return _to_decimal(rate)


def aggregate(
    transactions: Iterable[Transaction],
    cards: Mapping[str, Card],
    tracked_categories: Sequence[str]
) -> List[MonthlySavingsRecord]:
    """Aggregate with the reference point value and key-presence rate lookup."""
    return SavingsAggregator().aggregate(transactions, cards, tracked_categories)
