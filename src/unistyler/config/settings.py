"""Configuration settings for Unistyler."""

from pathlib import Path

from pydantic import BaseModel, Field

BUNDLED_PACKS_DIR = Path(__file__).resolve().parent.parent / "data" / "packs"


class ValidationConfig(BaseModel):
    """Configuration for pack validation."""

    strict: bool = Field(
        default=True,
        description="Also check category, price, decorators and duplicate ids",
    )


class EngineConfig(BaseModel):
    """Configuration for the style engine."""

    default_pack_id: str = Field(
        default="default",
        min_length=1,
        description="Pack used when a call does not name one",
    )
    max_text_length: int = Field(
        default=200,
        ge=1,
        le=10_000,
        description="Longest input accepted by the CLI",
    )
    sanitize_input: bool = Field(
        default=True,
        description="Strip surrounding whitespace from CLI input",
    )


class PacksConfig(BaseModel):
    """Where font pack files live."""

    packs_dir: Path = Field(
        default=BUNDLED_PACKS_DIR,
        description="Directory scanned for *.json pack files",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class UnistylerSettings(BaseModel):
    """Main application settings."""

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    packs: PacksConfig = Field(default_factory=PacksConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> UnistylerSettings:
    """Get default application settings."""
    return UnistylerSettings()
