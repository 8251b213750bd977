"""Configuration management for s3-listing-tools."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "s3-listing-tools"

    backend: str = "aws-cli"
    aws_cli_path: str = "aws"
    command_timeout: int = 3600
    progress_step: int = 10
    output_dir: str = "."

    model_config = {
        "env_prefix": "S3_LISTING_",
        "case_sensitive": False,
    }


settings = Settings()
