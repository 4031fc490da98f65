"""Pydantic response schemas for the festival organizer API.

Every level of the hierarchy is a list on the wire so that the sorted
order survives any JSON parser.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class FestivalResponse(BaseModel):
    name: str


class BandResponse(BaseModel):
    name: str
    festivals: list[FestivalResponse] = Field(default_factory=list)


class RecordLabelResponse(BaseModel):
    name: str
    bands: list[BandResponse] = Field(default_factory=list)


class FestivalHierarchyResponse(BaseModel):
    """Record labels sorted by name, each with its sorted bands and festivals."""

    record_labels: list[RecordLabelResponse]
    total_record_labels: int
    generated_at: datetime


class CacheStatusResponse(BaseModel):
    type: str
    state: str | None = None
    populated_at: str | None = None
    ttl: str | None = None


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    cache: CacheStatusResponse


class ErrorResponse(BaseModel):
    """Error body returned for application errors."""

    error: str
    detail: str
    provider: str | None = None
    upstream_status: int | None = None
