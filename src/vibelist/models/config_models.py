"""Configuration models for VibeList.

The storage section selects which key-value backend holds the task
snapshot; the output section controls how the CLI renders it.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_STORAGE_KEY = "vibelist_tasks"


class StorageConfig(BaseModel):
    """Storage configuration."""

    backend: Literal["file", "sqlite", "memory"] = Field(
        default="file", description="Key-value backend holding the task snapshot"
    )
    path: str | None = Field(
        default=None, description="Backend file path (defaults to the user data dir)"
    )
    key: str = Field(default=DEFAULT_STORAGE_KEY, description="Namespace key")
    indent: int | None = Field(default=2, ge=0)

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("key cannot be empty")
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main VibeList configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
