"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Log file and verbosity configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    file: str = Field("citekit.log", description="Log file name inside the citekit home directory")
    max_bytes: int = Field(5 * 1024 * 1024, gt=0, description="Rotate the log file after this many bytes")
    backup_count: int = Field(3, ge=0, description="Number of rotated log files to keep")
