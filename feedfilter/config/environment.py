"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        filter_keywords: Optional[str] = None,
        max_workers: Optional[int] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.filter_keywords = filter_keywords
        self.max_workers = max_workers
        self.log_level = log_level
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - FEEDFILTER_KEYWORDS: Filter query, overrides filter.keywords from the config file
    - FEEDFILTER_MAX_WORKERS: Worker thread count (positive integer)
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label attached to log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    filter_keywords = os.getenv("FEEDFILTER_KEYWORDS") or None
    max_workers_str = os.getenv("FEEDFILTER_MAX_WORKERS")
    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")

    max_workers = None
    if max_workers_str:
        try:
            max_workers = int(max_workers_str)
            if max_workers < 1:
                errors.append(
                    f"Invalid FEEDFILTER_MAX_WORKERS: {max_workers}. Must be at least 1."
                )
        except ValueError:
            errors.append(
                f"Invalid FEEDFILTER_MAX_WORKERS: '{max_workers_str}'. Must be a valid integer."
            )

    if log_level:
        log_level = log_level.upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the variables in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        filter_keywords=filter_keywords,
        max_workers=max_workers,
        log_level=log_level,
        environment=environment,
    )
