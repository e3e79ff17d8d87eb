"""Configuration module for the spending analytics engine."""

from household_spending.config.logging import configure_logging, get_logger
from household_spending.config.palette import load_category_palette
from household_spending.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "load_category_palette",
]
