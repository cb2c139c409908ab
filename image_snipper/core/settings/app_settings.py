"""Application settings using pydantic-settings."""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputSettings(BaseModel):
    """Encoder configuration for written tiles."""

    jpeg_quality: int = Field(default=95, ge=0, le=100, description="JPEG encoder quality")
    png_compression: int = Field(
        default=3, ge=0, le=9, description="PNG compression level (0 = none, 9 = smallest)"
    )


class CLISettings(BaseModel):
    """Command line behaviour."""

    pause_on_error: bool = Field(
        default=False,
        description="Wait for a keypress before exiting with a non-zero code on an interactive console",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    loggers: dict[str, str] = Field(default={}, description="Loggers and their levels")
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(
        default="[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
        description="Log format",
    )
    date_format: str = Field(default="%Y-%m-%d %H:%M:%S", description="Log date format")
    rotate_logs: bool = Field(default=False, description="Rotate logs daily")
    log_file: str | None = Field(default=None, description="Log file to write to")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a known level name."""
        level = v.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppSettings(BaseSettings):
    """Root application settings."""

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_prefix="SNIPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLISettings = Field(default_factory=CLISettings)
