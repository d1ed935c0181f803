"""Raw inbound payload models.

These mirror the wire shape of the board endpoint (camelCase keys, dates as
text, a `statusId` reference into the statuses list). The normalizer turns
them into `Column` and `Feature` instances.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .feature import coerce_id

DEFAULT_STATUS_COLOR = "#94A3B8"


class RawStatus(BaseModel):
    """A column record as delivered by the payload source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    color: str = DEFAULT_STATUS_COLOR

    @field_validator("id", mode="before")
    @classmethod
    def coerce_numeric_id(cls, v: Any) -> Any:
        return coerce_id(v)

    @field_validator("color", mode="before")
    @classmethod
    def default_color(cls, v: Any) -> Any:
        return v or DEFAULT_STATUS_COLOR

    @field_validator("name", mode="before")
    @classmethod
    def none_as_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class RawFeature(BaseModel):
    """A feature record as delivered by the payload source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    start_at: Any = Field(default=None, alias="startAt")
    end_at: Any = Field(default=None, alias="endAt")
    status_id: str | None = Field(default=None, alias="statusId")
    # Opaque: accepted in whatever shape the source sends
    owner: Any = None
    initiative: Any = None
    release: Any = None

    @field_validator("id", "status_id", mode="before")
    @classmethod
    def coerce_ids(cls, v: Any) -> Any:
        return coerce_id(v)

    @field_validator("name", mode="before")
    @classmethod
    def none_as_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class BoardPayload(BaseModel):
    """The complete inbound payload: features plus the statuses they reference."""

    model_config = ConfigDict(extra="ignore")

    features: list[RawFeature] = Field(default_factory=list)
    statuses: list[RawStatus] = Field(default_factory=list)

    @field_validator("features", "statuses", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def empty(cls) -> "BoardPayload":
        return cls()
