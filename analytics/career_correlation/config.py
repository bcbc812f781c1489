"""
Configuration management for the Career Correlation Engine.

Loads environment variables and provides configuration settings.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration settings for the correlation engine."""

    # Input
    dataset_path: str = "career_dataset.csv"

    # Logging
    log_level: str = "INFO"
    verbose: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create a Config instance from environment variables.

        Optional environment variables:
        - CAREER_DATASET_PATH: Path to the career dataset CSV
        - LOG_LEVEL: Logging level name (DEBUG, INFO, WARNING, ...)
        - VERBOSE: 'true' or 'false'

        Returns:
            Config: Configuration instance
        """
        dataset_path = os.getenv("CAREER_DATASET_PATH", "career_dataset.csv")
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        verbose = os.getenv("VERBOSE", "true").lower() == "true"

        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got '{log_level}'."
            )

        return cls(
            dataset_path=dataset_path,
            log_level=log_level,
            verbose=verbose,
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return getattr(logging, self.log_level)


# Global config instance (lazy loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: Global configuration object
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
