"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..sources.http import DEFAULT_SOURCE_URL


class Settings(BaseSettings):
    """Application settings."""

    source_url: str = Field(
        default=DEFAULT_SOURCE_URL,
        description="Endpoint returning the board payload as JSON",
    )

    data_file: Path | None = Field(
        default=None,
        description="Read the board payload from a local JSON/YAML file instead of source_url",
    )

    fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for the initial payload before starting with an empty board",
    )

    seed: int | None = Field(
        default=None,
        description="Seed for column accent selection (random when unset)",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "FEATUREBOARD_",
    }
