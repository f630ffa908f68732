"""Utility functions."""
from .config_manager import ConfigManager, AppConfig, BuildConfig, LoggingConfig
from .logger import setup_logging, get_logger
from .tokenizer import next_token, tokenize, separator_set

__all__ = [
    "ConfigManager", "AppConfig", "BuildConfig", "LoggingConfig",
    "setup_logging", "get_logger",
    "next_token", "tokenize", "separator_set",
]
