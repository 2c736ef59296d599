"""Configuration file loading and validation."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, HttpUrl, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import (
    API_BASE_URL_DEFAULT,
    API_PATH_CODE_SAMPLES,
    API_PATH_RESUME,
    API_PATH_RUN_CODE_SAMPLE,
    LOG_FILE_DEFAULT,
    TIMEOUT_HTTP_REQUEST,
)
from .errors import ConfigException

logger = logging.getLogger(__name__)


class ApiConfig(BaseModel):
    """Remote résumé service configuration."""

    base_url: HttpUrl = Field(default=API_BASE_URL_DEFAULT, validate_default=True)
    timeout: int = Field(default=TIMEOUT_HTTP_REQUEST, ge=1)
    resume_path: str = API_PATH_RESUME
    samples_path: str = API_PATH_CODE_SAMPLES
    run_path: str = API_PATH_RUN_CODE_SAMPLE

    @field_validator("resume_path", "samples_path", "run_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        v = v.strip().strip("/")
        if not v:
            raise ValueError("API path cannot be empty")
        return v

    def endpoint(self, path: str) -> str:
        return f"{str(self.base_url).rstrip('/')}/{path}"


class Config(BaseSettings):
    """Application configuration."""

    log_file: str = Field(default=LOG_FILE_DEFAULT)
    api: ApiConfig = Field(default_factory=ApiConfig)

    model_config = SettingsConfigDict(
        env_prefix="VITAE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix="VITAE_",
                env_nested_delimiter="__",
            )

        return _build(_Config)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load from a file when given, else from environment and defaults."""
        if config_path:
            return cls.load_from_file(config_path)
        logger.debug("No configuration file given, using environment and defaults")
        return _build(cls)


def _build(settings_cls) -> Config:
    try:
        return settings_cls()
    except ValidationError as e:
        error_lines = ["Configuration validation failed:"]
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error["loc"])
            error_lines.append(f"  - {loc}: {error['msg']}")
        raise ConfigException("\n".join(error_lines)) from e
    except ValueError as e:
        raise ConfigException(f"Invalid configuration file: {e}") from e
