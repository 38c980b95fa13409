"""Scope search configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScopeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    folder: str | None = Field(None, description="Folder searched by filename when a link path does not resolve")

    @field_validator("folder")
    @classmethod
    def _reject_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("scope.folder cannot be empty")
        return value
