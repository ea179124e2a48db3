"""Configuration models for TodoTask CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)


class DashboardConfig(BaseModel):
    """Dashboard rendering configuration."""

    bar_width: int = Field(default=20, ge=5, le=80)


class AppConfig(BaseModel):
    """Root application configuration persisted as config.json."""

    database_path: str | None = Field(
        default=None, description="SQLite vault path (default: user data dir)"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
