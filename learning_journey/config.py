"""
Configuration management for learning-journey.

Loads the data file location and heatmap window from environment variables.
"""

import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

DEFAULT_DATA_PATH = "data/learning.json"
DEFAULT_DAYS_BACK = 90

LEARNING_DATA_PATH = os.getenv("LEARNING_DATA_PATH", DEFAULT_DATA_PATH)
HEATMAP_DAYS_BACK = os.getenv("HEATMAP_DAYS_BACK", str(DEFAULT_DAYS_BACK))


def get_days_back(value: str | None = None) -> int:
    """
    Parse the configured heatmap window.

    Args:
        value: Raw setting, defaults to HEATMAP_DAYS_BACK

    Returns:
        Number of days to look back

    Raises:
        ValueError: If the value is not a positive integer
    """
    if value is None:
        value = HEATMAP_DAYS_BACK

    try:
        days_back = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"HEATMAP_DAYS_BACK must be a whole number, got {value!r}")

    if days_back <= 0:
        raise ValueError(f"HEATMAP_DAYS_BACK must be positive, got {days_back}")

    return days_back


def validate_config(check_days_back: bool = True):
    """
    Validate that the configuration is usable.

    Args:
        check_days_back: Whether to check HEATMAP_DAYS_BACK. Skipped when
            the window is given on the command line.
    """
    problems = []

    if not LEARNING_DATA_PATH:
        problems.append("LEARNING_DATA_PATH is empty")

    if check_days_back:
        try:
            get_days_back()
        except ValueError as e:
            problems.append(str(e))

    if problems:
        raise ValueError(
            f"Invalid configuration: {'; '.join(problems)}\n"
            "Check your .env file or environment variables."
        )
