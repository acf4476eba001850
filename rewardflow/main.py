"""Command-line entry point: print chart-ready monthly savings as JSON."""
import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from rewardflow.config.settings import AppSettings
from rewardflow.rewards.aggregator import SavingsAggregator
from rewardflow.rewards.loader import load_dataset
from rewardflow.rewards.models import MonthlySavingsRecord
from rewardflow.rewards.sample_data import SAMPLE_CARDS, SAMPLE_TRANSACTIONS
from rewardflow.utils.exceptions import RewardFlowError
from rewardflow.utils.logger import configure_logging, get_logger, set_account_context

logger = get_logger()


def build_chart_payload(records: List[MonthlySavingsRecord], category_colors: Dict[str, str]) -> dict:
    """Combine aggregated rows with the legend the chart renders them with."""
    return {
        "categories": [
            {"name": name, "color": color} for name, color in category_colors.items()
        ],
        "data": [record.to_chart_row() for record in records],
    }


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="RewardFlow monthly savings report")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", type=Path, help="JSON or YAML file with transactions and cards")
    source.add_argument("--sample", action="store_true", help="Use the built-in demo statement")
    parser.add_argument("--account", help="Account ID shown in log lines")
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the savings report."""
    args = _parse_args(argv)

    try:
        settings = AppSettings.load(args.config)
        configure_logging(
            args.log_level or settings.log_level,
            settings.logs_dir,
            settings.log_max_file_size_mb,
            settings.log_backup_count
        )
        set_account_context(args.account)

        if args.sample:
            transactions, cards = SAMPLE_TRANSACTIONS, SAMPLE_CARDS
        else:
            transactions, cards = load_dataset(args.data)

        aggregator = SavingsAggregator.from_settings(settings)
        records = aggregator.aggregate(transactions, cards, settings.tracked_categories)
    except RewardFlowError as e:
        logger.error(f"Failed to build savings report: {e}")
        return 1

    print(json.dumps(build_chart_payload(records, settings.category_colors), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
