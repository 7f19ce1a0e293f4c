"""
Documents bucket configuration.

Settings for the raw document storage bucket that triggers ingestion.

Dependencies: pydantic_settings
System role: Documents bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentsSettings(BaseSettings):
    """Settings for the documents bucket."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bucket_name: str = Field(
        default="",
        description="S3 bucket whose object-created notifications are ingested",
    )
