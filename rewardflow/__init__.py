"""RewardFlow: monthly card-reward savings for charting."""

__version__ = "0.1.0"
