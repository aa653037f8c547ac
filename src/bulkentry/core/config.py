"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ProcessorConfig(BaseSettings):
    """Submission engine configuration."""

    model_config = {"env_prefix": "BULKENTRY_PROCESSOR_"}

    batch_size: int = Field(default=10, ge=1)
    auto_publish: bool = True
    environment: str = "development"  # publish target
    primary_schema_id: str = "mdu_entries"
    secondary_schema_id: str = "tariff_entries"
    batch_delay_ms: int = Field(default=1000, ge=0)
    strict_mapping: bool = False
    lenient_columns: bool = False  # drop mismatched rows instead of failing
    delimiter: str = ","


class ContentstackConfig(BaseSettings):
    """Content management API configuration."""

    model_config = {"env_prefix": "BULKENTRY_CONTENTSTACK_"}

    base_url: str = "https://api.contentstack.io/v3"
    api_key: str = ""
    management_token: str = ""
    locale: str = "en-us"
    timeout: float = 30.0


class S3Config(BaseSettings):
    """S3 source file configuration."""

    model_config = {"env_prefix": "BULKENTRY_S3_"}

    bucket: str = "bulkentry-uploads"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class UploadConfig(BaseSettings):
    """Limits applied to files before they reach the engine."""

    model_config = {"env_prefix": "BULKENTRY_UPLOAD_"}

    max_upload_mb: int = 10
    allowed_suffixes: list[str] = [".csv"]


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "BULKENTRY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    processor: ProcessorConfig = Field(default_factory=ProcessorConfig)
    contentstack: ContentstackConfig = Field(default_factory=ContentstackConfig)
    s3: S3Config = Field(default_factory=S3Config)
    upload: UploadConfig = Field(default_factory=UploadConfig)
