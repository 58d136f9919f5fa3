"""
Configuration settings for the table state engine.

Uses Pydantic Settings to load environment variables for logging, table
defaults (page size, column minimum width), and spreadsheet export.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Table defaults
    page_size: int = Field(5, alias="TABLE_PAGE_SIZE")
    page_size_options: List[int] = Field(
        default_factory=lambda: [5, 10, 20, 30, 40, 50], alias="TABLE_PAGE_SIZE_OPTIONS"
    )
    min_column_width: int = Field(50, alias="TABLE_MIN_COLUMN_WIDTH")

    # Export
    export_filename: str = Field("table-data.xlsx", alias="EXPORT_FILENAME")
    export_sheet_name: str = Field("Data", alias="EXPORT_SHEET_NAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
