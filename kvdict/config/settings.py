"""
KV-Dictionary Configuration Settings

Configuration constants for the dictionary, overridable through
environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Dictionary configuration settings."""

    # Store settings
    DEFAULT_CAPACITY: int = int(os.environ.get("KV_DICT_DEFAULT_CAPACITY", "10"))

    # Logging settings
    DEBUG: bool = os.environ.get("KV_DICT_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KV_DICT_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
