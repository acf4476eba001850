"""Tests for logging setup."""
import logging
import unittest
import tempfile
import shutil
from pathlib import Path

from rewardflow.utils.logger import configure_logging, get_logger, set_account_context


class TestLogger(unittest.TestCase):
    """Test logger configuration and account context."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        set_account_context(None)
        configure_logging("INFO")
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_single_named_logger(self):
        """All modules share the rewardflow logger."""
        self.assertIs(get_logger(), logging.getLogger("rewardflow"))

    def test_file_logging_with_account_context(self):
        """File handler writes records tagged with the account."""
        logger = configure_logging("DEBUG", str(self.test_dir), max_file_size_mb=1, backup_count=1)
        set_account_context("acct-42")

        logger.debug("hello from test")
        for handler in logger.handlers:
            handler.flush()

        content = (self.test_dir / "rewardflow.log").read_text(encoding="utf-8")
        self.assertIn("[account:acct-42] hello from test", content)
        self.assertIn("[DEBUG]", content)

        for handler in list(logger.handlers):
            handler.close()

    def test_console_follows_log_level(self):
        """Console handler shows DEBUG records when the level is DEBUG."""
        logger = configure_logging("DEBUG")

        console = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
        self.assertEqual(len(console), 1)
        self.assertEqual(console[0].level, logging.DEBUG)

        logger = configure_logging("WARNING")
        console = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
        self.assertEqual(console[0].level, logging.WARNING)

    def test_default_context_is_system(self):
        """Records without an account are tagged system."""
        logger = configure_logging("INFO", str(self.test_dir))

        logger.info("no account")
        for handler in logger.handlers:
            handler.flush()

        content = (self.test_dir / "rewardflow.log").read_text(encoding="utf-8")
        self.assertIn("[account:system] no account", content)

        for handler in list(logger.handlers):
            handler.close()


if __name__ == "__main__":
    unittest.main()
