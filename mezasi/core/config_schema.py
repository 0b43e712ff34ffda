"""
Configuration Schemas.

Pydantic models defining the expected structure of each packaged YAML
settings file and of the profile store. A YAML file with missing keys,
wrong types, or unknown fields fails at load time instead of deep inside
a command.

Each top-level class corresponds to one file:
    ApplicationSchema  → settings/application.yaml
    LoggingSchema      → settings/logging.yaml
    PitSchema          → <pit_dir>/pit.yaml
"""

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    user_agent: str
    profile_key: str
    endpoint_field: str
    default_profile: str
    connect_timeout: float = Field(gt=0)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: str
    format: str
    handlers: HandlersSchema


# =============================================================================
# pit.yaml (profile store)
# =============================================================================


class PitSchema(BaseModel):
    """Profile selector. Other keys written by pit-compatible tools are ignored."""

    model_config = ConfigDict(extra="ignore")

    profile: str | None = None
