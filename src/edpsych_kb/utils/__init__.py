"""Utility modules for the knowledge engine."""

from .config import Config, load_config
from .logger import get_logger, setup_logger

__all__ = ["Config", "load_config", "get_logger", "setup_logger"]
