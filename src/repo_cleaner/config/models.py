"""Configuration models."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from repo_cleaner.config.exceptions import InvalidConfigurationError, MissingConfigurationError

DEFAULT_MAX_AGE_MONTHS = 12
DEFAULT_REPO_LIST_FILE = "masterRepolist.txt"


class RepoCleanerConfig(BaseSettings):
    """Configuration for repo-cleaner application."""

    # Staleness policy
    max_age_months: int = Field(
        default=DEFAULT_MAX_AGE_MONTHS,
        description="Branches with no commits for this many calendar months are stale",
    )

    # Git settings
    remote_name: str = Field(
        default="origin",
        description="Remote whose branches are audited and deleted",
    )

    # Fleet settings
    repo_list_file: Path = Field(
        default=Path(DEFAULT_REPO_LIST_FILE),
        description="Newline-delimited list of repository paths or URLs",
    )
    clone_root: Path | None = Field(
        default=None,
        description="Directory that receives clones of URL repositories (default: repo list directory)",
    )

    model_config = SettingsConfigDict(
        env_file=[".env.repocleaner", ".env"],
        env_file_encoding="utf-8",
        env_prefix="REPO_CLEANER_",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(
        self,
        _env_file: str | Path | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize configuration.

        Args:
            _env_file: Optional path to custom env file (use env_file for public API)
            **kwargs: Additional configuration values

        Raises:
            MissingConfigurationError: If env_file is specified but does not exist
        """
        env_file = kwargs.pop("env_file", _env_file)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise MissingConfigurationError(f"Environment file not found: {env_file}")
            # settings_customise_sources picks this up from the init kwargs
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Swap the default dotenv source for a custom env file when one was given.

        Args:
            settings_cls: The settings class being instantiated
            init_settings: Settings from __init__ arguments
            env_settings: Settings from environment variables
            dotenv_settings: Settings from .env files
            file_secret_settings: Settings from secret files

        Returns:
            Tuple of settings sources in priority order
        """
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, custom_dotenv, env_settings, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("max_age_months")
    @classmethod
    def validate_max_age_months(cls, v: int) -> int:
        """Ensure the threshold covers at least one month.

        Args:
            v: Threshold in months

        Returns:
            The validated threshold

        Raises:
            InvalidConfigurationError: If the threshold is below one month
        """
        if v < 1:
            raise InvalidConfigurationError(f"max_age_months must be at least 1, got {v}")
        return v

    @field_validator("remote_name")
    @classmethod
    def validate_remote_name(cls, v: str) -> str:
        """Ensure the remote name can be used as a ref prefix.

        Args:
            v: Remote name

        Returns:
            Remote name without surrounding whitespace

        Raises:
            InvalidConfigurationError: If the name is empty or contains whitespace or '/'
        """
        name = v.strip()
        if not name or "/" in name or any(ch.isspace() for ch in name):
            raise InvalidConfigurationError(f"Invalid remote name: {v!r}")
        return name

    @property
    def resolved_clone_root(self) -> Path:
        """Directory where URL repositories are cloned.

        Returns:
            clone_root if set, otherwise the directory holding the repo list
        """
        if self.clone_root is not None:
            return self.clone_root.expanduser()
        return self.repo_list_file.expanduser().resolve().parent
