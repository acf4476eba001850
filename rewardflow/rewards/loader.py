"""Validation of raw transaction and card records."""
import datetime
import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import DEFAULT_RATE_KEY, Card, RewardRule, RewardType, Transaction
from rewardflow.utils.logger import get_logger
from rewardflow.utils.exceptions import ValidationError as RewardFlowValidationError

logger = get_logger()


class TransactionSchema(BaseModel):
    """Pydantic schema for a raw transaction."""
    id: str
    date: datetime.date = Field(description="Transaction date in YYYY-MM-DD format")
    description: str = ""
    amount: Decimal = Field(ge=0)
    category: str
    card_id: str = Field(alias="cardId")

    model_config = {"populate_by_name": True}

    @field_validator("date", mode="before")
    @classmethod
    def _strict_iso_date(cls, value: Any) -> Any:
        # Only ISO strings or date objects; no numeric timestamps
        if isinstance(value, str):
            return datetime.date.fromisoformat(value)
        if isinstance(value, datetime.date):
            return value
        raise ValueError(f"expected an ISO date string, got {value!r}")


class RewardRuleSchema(BaseModel):
    """Pydantic schema for a card reward rule."""
    type: RewardType
    rates: Dict[str, Decimal]

    @field_validator("rates")
    @classmethod
    def _check_rates(cls, rates: Dict[str, Decimal]) -> Dict[str, Decimal]:
        if DEFAULT_RATE_KEY not in rates:
            raise ValueError(f"rates must define a '{DEFAULT_RATE_KEY}' rate")
        negative = [category for category, rate in rates.items() if rate < 0]
        if negative:
            raise ValueError(f"negative rates for: {', '.join(negative)}")
        return rates


class CardSchema(BaseModel):
    """Pydantic schema for a raw card."""
    id: str
    name: str = ""
    rewards: RewardRuleSchema


def _record_label(raw: Any, index: int) -> str:
    if isinstance(raw, Mapping) and raw.get("id"):
        return str(raw["id"])
    return f"#{index}"


def load_transactions(raw_transactions: List[Dict[str, Any]]) -> List[Transaction]:
    """
    Validate raw transaction dicts into Transaction objects.

    Args:
        raw_transactions: Records with id, date, description, amount,
            category and cardId (or card_id)

    Returns:
        List of Transaction objects

    Raises:
        ValidationError: A record is malformed; the message names it
    """
    transactions = []
    for index, raw in enumerate(raw_transactions):
        try:
            parsed = TransactionSchema.model_validate(raw)
        except ValidationError as e:
            raise RewardFlowValidationError(
                f"Invalid transaction {_record_label(raw, index)}: {e}"
            ) from e

        transactions.append(Transaction(
            id=parsed.id,
            date=parsed.date,
            description=parsed.description,
            amount=parsed.amount,
            category=parsed.category,
            card_id=parsed.card_id
        ))

    logger.debug(f"Loaded {len(transactions)} transactions")
    return transactions


def load_cards(raw_cards: Union[Dict[str, Dict[str, Any]], List[Dict[str, Any]]]) -> Dict[str, Card]:
    """
    Validate raw card records into a catalog keyed by card id.

    Accepts either a list of cards or a mapping of id -> card; in the mapping
    form a card without its own ``id`` takes the key.
    """
    if isinstance(raw_cards, Mapping):
        items = []
        for card_id, raw in raw_cards.items():
            if isinstance(raw, Mapping):
                raw = {"id": card_id, **raw}
            items.append(raw)
    else:
        items = list(raw_cards)

    cards: Dict[str, Card] = {}
    for index, raw in enumerate(items):
        try:
            parsed = CardSchema.model_validate(raw)
        except ValidationError as e:
            raise RewardFlowValidationError(
                f"Invalid card {_record_label(raw, index)}: {e}"
            ) from e

        if parsed.id in cards:
            raise RewardFlowValidationError(f"Duplicate card id: {parsed.id}")

        cards[parsed.id] = Card(
            id=parsed.id,
            name=parsed.name,
            rewards=RewardRule(type=parsed.rewards.type, rates=dict(parsed.rewards.rates))
        )

    logger.debug(f"Loaded {len(cards)} cards")
    return cards


def load_dataset(path: Path) -> Tuple[List[Transaction], Dict[str, Card]]:
    """
    Load transactions and cards from a JSON or YAML file.

    The file holds a ``transactions`` list and a ``cards`` list or mapping.
    """
    path = Path(path)
    if not path.exists():
        raise RewardFlowValidationError(f"Data file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise RewardFlowValidationError(f"Cannot parse data file {path}: {e}") from e

    if not isinstance(data, dict):
        raise RewardFlowValidationError(f"Data file {path} must contain an object")

    cards = load_cards(data.get("cards") or {})
    transactions = load_transactions(data.get("transactions") or [])

    logger.info(f"Loaded {len(transactions)} transactions and {len(cards)} cards from {path.name}")
    return transactions, cards
