"""Pydantic schemas for the content search API response.

The API payload is untrusted, so every field other than ``id`` is optional
and unknown fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class RawSpace(_WireModel):
    key: str | None = None
    name: str | None = None


class RawUser(_WireModel):
    display_name: str | None = Field(default=None, alias="displayName")


class RawVersion(_WireModel):
    when: str | None = None
    by: RawUser | None = None


class RawLinks(_WireModel):
    webui: str | None = None


class RawResult(_WireModel):
    """A single content entry as returned by the search endpoint."""

    id: str
    title: str | None = None
    space: RawSpace | None = None
    version: RawVersion | None = None
    links: RawLinks | None = Field(default=None, alias="_links")
    excerpt: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # Some deployments return numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class RawSearchResponse(_WireModel):
    """Top-level search response envelope."""

    results: list[RawResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value):
        return [] if value is None else value
