"""Configuration management for repo-cleaner."""

from repo_cleaner.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from repo_cleaner.config.models import RepoCleanerConfig

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RepoCleanerConfig",
]
