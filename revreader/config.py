"""Configuration management using pydantic-settings."""

import os
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Reader settings loaded from environment variables (REVREADER_*)."""

    model_config = SettingsConfigDict(
        env_prefix="REVREADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Reader Configuration
    buffer_size: int = Field(default=4096, gt=0, description="Bytes read per backward block")
    encoding: str = Field(default="utf-8", description="Text encoding of the file")
    delimiter: Optional[str] = Field(default=None, description="Record delimiter (defaults to os.linesep)")
    errors: str = Field(default="strict", description="Decode error handler")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default=None, description="Log file path")

    @field_validator('delimiter')
    @classmethod
    def validate_delimiter(cls, v):
        """Reject an empty delimiter; None means the platform line separator."""
        if v is not None and v == "":
            raise ValueError("delimiter must not be empty")
        return v

    def get_delimiter(self) -> str:
        """Get the configured delimiter, falling back to os.linesep."""
        return self.delimiter if self.delimiter is not None else os.linesep


# Global settings instance
settings = Settings()
