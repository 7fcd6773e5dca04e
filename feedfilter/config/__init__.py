"""Configuration management module for feedfilter."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import (
    AppConfig,
    FilterConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    PipelineConfig,
)
from .validators import check_keywords

__all__ = [
    "load_config",
    "load_environment_config",
    "check_keywords",
    "AppConfig",
    "FilterConfig",
    "PipelineConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    "LogLevel",
    "LogFormat",
    "ConfigurationError",
]
