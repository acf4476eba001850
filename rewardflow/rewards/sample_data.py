"""Demo card catalog and statement used by the command-line runner."""
from datetime import date
from decimal import Decimal

from .models import Card, RewardRule, RewardType, Transaction

SAMPLE_CARDS = {
    "card-1": Card(
        id="card-1",
        name="Cash Back King",
        rewards=RewardRule(
            type=RewardType.CASHBACK,
            rates={"Groceries": Decimal("0.05"), "Gas": Decimal("0.03"), "default": Decimal("0.01")}
        )
    ),
    "card-2": Card(
        id="card-2",
        name="Travel Points Pro",
        rewards=RewardRule(
            type=RewardType.POINTS,
            rates={"Dining": Decimal("3"), "Travel": Decimal("5"), "default": Decimal("1")}
        )
    ),
}

SAMPLE_TRANSACTIONS = [
    Transaction("t1", date(2025, 1, 5), Decimal("85.50"), "Groceries", "card-1", "Super Foods"),
    Transaction("t2", date(2025, 1, 12), Decimal("45.00"), "Dining", "card-2", "The Great Cafe"),
    Transaction("t3", date(2025, 1, 20), Decimal("50.00"), "Gas", "card-1", "Gas Station"),
    Transaction("t4", date(2025, 2, 8), Decimal("120.00"), "Groceries", "card-1", "Grocery Haul"),
    Transaction("t5", date(2025, 2, 15), Decimal("1200.00"), "Travel", "card-2", "Airfare to Bali"),
    Transaction("t6", date(2025, 3, 10), Decimal("150.00"), "Dining", "card-2", "Fancy Dinner"),
    Transaction("t7", date(2025, 3, 22), Decimal("35.00"), "Other", "card-2", "Book Store"),
]
