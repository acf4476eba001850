"""Logging infrastructure with account context."""
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


class AccountContextFilter(logging.Filter):
    """Add account context to log records."""

    def __init__(self):
        super().__init__()
        self.account_id: Optional[str] = None

    def filter(self, record):
        """Add account_id to record."""
        record.account_id = self.account_id or "system"
        return True


class RewardFlowLogger:
    """Centralized logging manager."""

    def __init__(self, log_level: str = "INFO", log_dir: Optional[str] = None,
                 max_file_size_mb: int = 10, backup_count: int = 30):
        self.account_filter = AccountContextFilter()

        self.logger = logging.getLogger("rewardflow")
        self.logger.setLevel(getattr(logging, log_level.upper()))

        # Remove existing handlers
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [account:%(account_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        # stdout carries command output, so console logs go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self.logger.level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(self.account_filter)
        self.logger.addHandler(console_handler)

        self.log_file: Optional[Path] = None
        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            self.log_file = log_path / "rewardflow.log"

            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(self.account_filter)
            self.logger.addHandler(file_handler)

    def set_account_context(self, account_id: Optional[str]):
        """Set current account context for logging."""
        self.account_filter.account_id = account_id

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[RewardFlowLogger] = None


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = RewardFlowLogger(log_level, os.getenv("REWARDFLOW_LOG_DIR"))
    return _logger_instance.get_logger()


def configure_logging(log_level: str, log_dir: Optional[str] = None,
                      max_file_size_mb: int = 10, backup_count: int = 30) -> logging.Logger:
    """Rebuild the global logger from explicit settings."""
    global _logger_instance
    _logger_instance = RewardFlowLogger(
        log_level,
        log_dir or os.getenv("REWARDFLOW_LOG_DIR"),
        max_file_size_mb,
        backup_count
    )
    return _logger_instance.get_logger()


def set_account_context(account_id: Optional[str]):
    """Set account context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_account_context(account_id)
