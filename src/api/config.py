"""API configuration settings."""

from typing import List, Optional

from pydantic_settings import BaseSettings

from constants import FORM_SCHEMA_PATH, REJECT_UNKNOWN_FIELDS, REVALIDATE_ON_UPDATE
from form_store.models.types import ValidationMode


class Settings(BaseSettings):
    """API settings configuration."""

    # API settings
    api_title: str = "Form Engine API"
    api_version: str = "1.0.0"
    api_description: str = "API for dynamic form schemas and their submissions"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]

    # Form settings, read from VALIDATION_MODE and friends
    form_schema_path: Optional[str] = FORM_SCHEMA_PATH
    validation_mode: ValidationMode = ValidationMode.LAST
    revalidate_on_update: bool = REVALIDATE_ON_UPDATE
    reject_unknown_fields: bool = REJECT_UNKNOWN_FIELDS


settings = Settings()
