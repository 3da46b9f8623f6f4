"""
Core type definitions for buildlink.

Provides the link lifecycle states and the report produced by a link pass.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class LinkState(str, Enum):
    """Lifecycle of a deferred link driver."""

    CREATED = "created"
    CONFIGURING = "configuring"
    LINKING = "linking"
    LINKED = "linked"
    FAILED = "failed"


class LinkReport(BaseModel):
    """Result of one configuration pass."""

    project_path: str = Field(description="Host project path")
    state: LinkState = Field(default=LinkState.LINKING)
    started_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: datetime | None = Field(default=None)
    duration_seconds: float = Field(default=0.0)
    linked_variants: list[str] = Field(default_factory=list)
    activated_features: list[str] = Field(default_factory=list)
    merged_buckets: dict[str, list[str]] = Field(
        default_factory=dict, description="Coordinates appended per host bucket, in order"
    )
    error_message: str | None = Field(default=None)

    def record_merge(self, bucket_name: str, coordinates: list[str]) -> None:
        """Record coordinates appended to a host bucket."""
        self.merged_buckets.setdefault(bucket_name, []).extend(coordinates)

    def mark_linked(self) -> None:
        """Mark the pass as successfully linked."""
        self.state = LinkState.LINKED
        self.completed_at = datetime.utcnow()
        self.duration_seconds = (self.completed_at - self.started_at).total_seconds()

    def mark_failed(self, error: str) -> None:
        """Mark the pass as failed."""
        self.state = LinkState.FAILED
        self.completed_at = datetime.utcnow()
        self.error_message = error
        self.duration_seconds = (self.completed_at - self.started_at).total_seconds()
