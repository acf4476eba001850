"""Tests for application settings."""
import unittest
import tempfile
import shutil
from decimal import Decimal
from pathlib import Path

from rewardflow.config.settings import AppSettings
from rewardflow.rewards.aggregator import SavingsAggregator
from rewardflow.rewards.models import CATEGORIES
from rewardflow.utils.exceptions import ConfigError

CONFIG_TEMPLATE = """
app:
  name: RewardFlow
  version: 1.2
logging:
  level: {level}
  max_file_size_mb: 5
  backup_count: 3
rewards:
  point_to_currency_rate: {point_rate}
  zero_rate_falls_back: true
categories:
  Travel: "#2196F3"
  Dining: "#FF9800"
"""


class TestAppSettings(unittest.TestCase):
    """Test AppSettings loading."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _write(self, text: str) -> Path:
        path = self.test_dir / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_default_config(self):
        """The packaged config tracks the standard categories."""
        settings = AppSettings.load()

        self.assertEqual(settings.tracked_categories, list(CATEGORIES))
        self.assertEqual(settings.point_to_currency_rate, Decimal("0.01"))
        self.assertFalse(settings.zero_rate_falls_back)
        self.assertIsNone(settings.logs_dir)

    def test_load_custom_config(self):
        """Values and category order come from the file."""
        settings = AppSettings.load(self._write(CONFIG_TEMPLATE.format(level="DEBUG", point_rate="0.015")))

        self.assertEqual(settings.app_version, "1.2")
        self.assertEqual(settings.tracked_categories, ["Travel", "Dining"])
        self.assertEqual(settings.category_colors["Dining"], "#FF9800")
        self.assertEqual(settings.point_to_currency_rate, Decimal("0.015"))
        self.assertTrue(settings.zero_rate_falls_back)

    def test_aggregator_from_settings(self):
        """Aggregator picks up point value and fallback mode."""
        settings = AppSettings.load(self._write(CONFIG_TEMPLATE.format(level="INFO", point_rate="0.02")))
        aggregator = SavingsAggregator.from_settings(settings)

        self.assertEqual(aggregator.point_to_currency_rate, Decimal("0.02"))
        self.assertTrue(aggregator.zero_rate_falls_back)

    def test_missing_file(self):
        """A missing config file is a configuration error."""
        with self.assertRaises(ConfigError):
            AppSettings.load(self.test_dir / "missing.yaml")

    def test_missing_key(self):
        """Missing sections are reported."""
        with self.assertRaises(ConfigError) as ctx:
            AppSettings.load(self._write("app:\n  name: x\n  version: 1\n"))
        self.assertIn("logging", str(ctx.exception))

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with self.assertRaises(ConfigError):
            AppSettings.load(self._write(CONFIG_TEMPLATE.format(level="LOUD", point_rate="0.01")))

    def test_invalid_point_rate(self):
        """Point value must be a number."""
        with self.assertRaises(ConfigError):
            AppSettings.load(self._write(CONFIG_TEMPLATE.format(level="INFO", point_rate="cheap")))

    def test_negative_point_rate(self):
        """Point value must not be negative."""
        with self.assertRaises(ConfigError):
            AppSettings.load(self._write(CONFIG_TEMPLATE.format(level="INFO", point_rate="-0.01")))

    def test_empty_file(self):
        """An empty file is a configuration error."""
        with self.assertRaises(ConfigError):
            AppSettings.load(self._write(""))


if __name__ == "__main__":
    unittest.main()
