"""Utility exports."""

from .config import ExtractionConfig, config_from_mapping, load_config
from .logging import get_logger
from .regions import Region, parse_region

__all__ = [
    "ExtractionConfig",
    "Region",
    "config_from_mapping",
    "get_logger",
    "load_config",
    "parse_region",
]
