"""Generator configuration.

Defaults come from environment variables with the ``SCHEMATIC_`` prefix;
values set in the schema's ``generator`` block override them for a single
run.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from schematic.models.generator import GeneratorOptions

logger = logging.getLogger(__name__)

DEFAULT_STATE_FILE_PATH = "./.schematic-state.json"
DEFAULT_OUTPUT_PATH = "../generated"


class ConfigError(Exception):
    """Raised when required generator configuration is missing or invalid."""


class Settings(BaseSettings):
    """Process-wide defaults loaded from environment variables with SCHEMATIC_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMATIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # Annotations
    annotation_prefix: str = "schematic"

    # State file, resolved relative to the schema file
    state_file_path: str = DEFAULT_STATE_FILE_PATH

    # Generated output
    output_path: str = DEFAULT_OUTPUT_PATH
    auto_index_foreign_keys: bool = False


class SchematicConfig(BaseModel):
    """Resolved configuration for one generation run.

    Only ``annotation_prefix`` and ``state_file_path`` are read by the
    annotation pipeline; the other values are passed through to SQL
    generation and migration writing.
    """

    model_config = ConfigDict(frozen=True)

    database_provider: str = Field(..., min_length=1)
    auto_index_foreign_keys: bool = False
    annotation_prefix: str = "schematic"
    state_file_path: str = DEFAULT_STATE_FILE_PATH
    output_path: str = DEFAULT_OUTPUT_PATH


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings with annotation prefix: %s", settings.annotation_prefix)

    return settings


def _config_value(config: dict[str, Any], key: str, default: Any) -> Any:
    value = config.get(key)
    return default if value is None else value


def extract_config(options: GeneratorOptions, settings: Settings | None = None) -> SchematicConfig:
    """Resolve the run configuration from the host's generator options.

    The database provider is taken from the first datasource.  Keys set in
    the generator block (``annotationPrefix``, ``stateFilePath``,
    ``autoIndexForeignKeys``) override *settings*; the output path comes
    from the generator's ``output`` value.

    Raises
    ------
    ConfigError
        If no datasource declares a provider, or a configured value has the
        wrong type.
    """
    settings = settings or load_settings()

    provider = options.datasources[0].provider if options.datasources else None
    if not provider:
        raise ConfigError("Database provider not found")

    generator = options.generator
    output = generator.output.value if generator.output is not None else None

    try:
        return SchematicConfig(
            database_provider=provider,
            auto_index_foreign_keys=_config_value(
                generator.config, "autoIndexForeignKeys", settings.auto_index_foreign_keys
            ),
            annotation_prefix=_config_value(generator.config, "annotationPrefix", settings.annotation_prefix),
            state_file_path=_config_value(generator.config, "stateFilePath", settings.state_file_path),
            output_path=output if output is not None else settings.output_path,
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid generator configuration: {exc}") from exc
