"""Content extraction configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ExtractConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    full_files: bool = Field(False, description="Extract anchor-less links by default")
    cache_dir: str = Field("extract-cache", description="Session extract cache directory, relative to citekit home")
