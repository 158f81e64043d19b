"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Profiler settings."""

    # AWS configuration
    aws_region: str = "us-east-1"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Discard a resource's start time once it completes, so a second
    # IN_PROGRESS/COMPLETE cycle in the same window is timed on its own.
    clear_start_on_complete: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="STACK_PROFILER_",
    )


# Global settings instance
settings = Settings()
