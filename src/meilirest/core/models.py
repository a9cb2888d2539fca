"""Data records decoded from Meilisearch responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .types import DumpStatus, HealthStatus


class MeiliModel(BaseModel):
    """
    Base class for all response records.

    Records are immutable and decoded strictly: a missing required field or
    a field the record does not declare fails decoding.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
    )


class Key(MeiliModel):
    """An API key."""

    key: str = Field(..., description="Key value sent as bearer token")
    uid: str | None = Field(default=None, description="Key identifier")
    name: str | None = Field(default=None, description="Human readable name")
    description: str | None = Field(default=None, description="What the key is used for")
    actions: list[str] | None = Field(default=None, description="Permitted actions")
    indexes: list[str] | None = Field(default=None, description="Accessible indexes")
    expires_at: datetime | None = Field(default=None, description="Expiration date")
    created_at: datetime | None = Field(default=None, description="Creation date")
    updated_at: datetime | None = Field(default=None, description="Last update date")


class Health(MeiliModel):
    """Server health."""

    status: HealthStatus = Field(..., description="Health status")


class Version(MeiliModel):
    """Server version information."""

    commit_sha: str = Field(..., description="Commit the server was built from")
    commit_date: datetime | None = Field(default=None, description="Date of that commit")
    build_date: datetime | None = Field(default=None, description="Build date (older servers)")
    pkg_version: str = Field(..., description="Package version")


class Dump(MeiliModel):
    """A dump creation process."""

    uid: str = Field(..., description="Dump identifier")
    status: DumpStatus = Field(..., description="Current status")
    started_at: datetime | None = Field(default=None, description="When the dump started")
    finished_at: datetime | None = Field(default=None, description="When the dump finished")


class IndexMetadata(MeiliModel):
    """Index metadata as returned by the /indexes routes."""

    uid: str = Field(..., description="Unique identifier of the index")
    name: str | None = Field(default=None, description="Index name (older servers)")
    primary_key: str | None = Field(default=None, description="Primary key of documents")
    created_at: datetime | None = Field(default=None, description="Creation date")
    updated_at: datetime | None = Field(default=None, description="Last update date")


class IndexStats(MeiliModel):
    """Statistics of a single index."""

    number_of_documents: int = Field(..., description="Number of stored documents")
    is_indexing: bool = Field(..., description="Whether an update is being processed")
    fields_distribution: dict[str, int] = Field(
        default_factory=dict, description="Occurrences of each field"
    )


class AllStats(MeiliModel):
    """Statistics of the whole instance."""

    database_size: int = Field(..., description="Database size in bytes")
    last_update: datetime | None = Field(default=None, description="Last update date")
    indexes: dict[str, IndexStats] = Field(
        default_factory=dict, description="Per-index statistics"
    )
