"""
Configuration Management.

Loads client settings from the packaged settings/*.yaml files, overrides
from MEZASI_* environment variables, and the service endpoint from a
pit-style profile store.

Settings (YAML, validated by config_schema):
    application.yaml   - Client identity, user agent, profile lookup keys, timeouts
    logging.yaml       - Logging configuration

Environment (MEZASI_ prefix):
    MEZASI_ENDPOINT      - Endpoint URL, bypasses the profile store
    MEZASI_PROFILE       - Profile name, overrides pit.yaml
    MEZASI_PIT_DIR       - Profile store directory (default ~/.pit)
    MEZASI_SETTINGS_DIR  - Alternate directory for the YAML settings

Profile store layout:
    <pit_dir>/pit.yaml         profile: default
    <pit_dir>/default.yaml     urume.config: {endpoint: "http://host/api/"}
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from mezasi.core.config_schema import ApplicationSchema, LoggingSchema, PitSchema
from mezasi.core.exceptions import ConfigurationError

PACKAGE_SETTINGS_DIR = Path(__file__).resolve().parent.parent / "settings"


class Settings(BaseSettings):
    """Overrides read from MEZASI_* environment variables."""

    endpoint: str | None = None
    profile: str | None = None
    pit_dir: str = "~/.pit"
    settings_dir: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="MEZASI_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    return Settings()


def get_settings_dir() -> Path:
    """Directory holding application.yaml and logging.yaml."""
    configured = get_settings().settings_dir
    if configured:
        return Path(configured).expanduser()
    return PACKAGE_SETTINGS_DIR


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = get_settings_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Client configuration loaded from the packaged YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Client identity and transport settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


# =============================================================================
# Profile store
# =============================================================================


def get_pit_dir() -> Path:
    """Profile store directory."""
    return Path(get_settings().pit_dir).expanduser()


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping")
    return data


def current_profile(pit_dir: Path | None = None) -> str:
    """
    Name of the active profile.

    MEZASI_PROFILE wins, then the 'profile' key of pit.yaml, then the
    default_profile from application.yaml.
    """
    env_profile = get_settings().profile
    if env_profile:
        return env_profile

    pit_dir = pit_dir or get_pit_dir()
    pit_file = pit_dir / "pit.yaml"
    if pit_file.exists():
        selector = PitSchema(**_read_yaml_mapping(pit_file))
        if selector.profile:
            return selector.profile

    return get_app_config().application.default_profile


def load_profile(profile: str, pit_dir: Path | None = None) -> dict[str, Any]:
    """
    Load every key stored under a profile.

    Raises:
        ConfigurationError: If the profile file does not exist or is malformed
    """
    pit_dir = pit_dir or get_pit_dir()
    profile_path = pit_dir / f"{profile}.yaml"
    if not profile_path.exists():
        raise ConfigurationError(f"Profile {profile!r} not found: {profile_path}")
    return _read_yaml_mapping(profile_path)


def validate_endpoint(endpoint: str) -> str:
    """Check that an endpoint is an absolute http(s) URL and return it."""
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid endpoint {endpoint!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"Invalid endpoint {endpoint!r}: expected an absolute http(s) URL"
        )
    return endpoint


def resolve_endpoint(endpoint: str | None = None, profile: str | None = None) -> str:
    """
    Resolve the service endpoint URL.

    Resolution order: explicit argument, MEZASI_ENDPOINT, then the profile
    store entry <profile_key>.<endpoint_field> of the selected profile.

    Args:
        endpoint: Endpoint passed on the command line, if any.
        profile: Profile passed on the command line, if any.

    Returns:
        The validated endpoint URL string.

    Raises:
        ConfigurationError: If no endpoint can be resolved or it is malformed
    """
    if endpoint:
        return validate_endpoint(endpoint)

    env_endpoint = get_settings().endpoint
    if env_endpoint:
        return validate_endpoint(env_endpoint)

    app = get_app_config().application
    pit_dir = get_pit_dir()
    profile_name = profile or current_profile(pit_dir)
    data = load_profile(profile_name, pit_dir)

    section = data.get(app.profile_key)
    value = section.get(app.endpoint_field) if isinstance(section, dict) else None
    if not value or not isinstance(value, str):
        raise ConfigurationError(
            f"Profile {profile_name!r} has no {app.profile_key}.{app.endpoint_field}. "
            f"Add it to {pit_dir / (profile_name + '.yaml')}:\n"
            f"{app.profile_key}:\n  {app.endpoint_field}: API endpoint (http://....)"
        )
    return validate_endpoint(value)
