"""Restructured festival data: record label -> band -> festival.

These are the models handed to callers of the festival service.  They are
frozen all the way down: ``bands`` and ``festivals`` are read-only
mappings (``MappingProxyType``) keyed by name, and their insertion order
is the sorted (ascending, ordinal) order produced by
:func:`festival_organizer.services.restructure.restructure_festivals`.

A :data:`Hierarchy` is an immutable tuple of record labels, itself sorted
by label name.  The cache owns one instance at a time and hands the same
object to every reader until it is repopulated.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


class Festival(BaseModel):
    """A festival, identified by name."""

    model_config = ConfigDict(frozen=True)

    name: str


class Band(BaseModel):
    """A band and the festivals it attended, keyed by festival name."""

    model_config = ConfigDict(frozen=True)

    name: str
    festivals: Mapping[str, Festival] = Field(default_factory=dict, validate_default=True)

    @field_validator("festivals", mode="after")
    @classmethod
    def _freeze_festivals(cls, value: Mapping[str, Festival]) -> Mapping[str, Festival]:
        return _read_only(value)


class RecordLabel(BaseModel):
    """A record label and the bands under its management, keyed by band name."""

    model_config = ConfigDict(frozen=True)

    name: str
    bands: Mapping[str, Band] = Field(default_factory=dict, validate_default=True)

    @field_validator("bands", mode="after")
    @classmethod
    def _freeze_bands(cls, value: Mapping[str, Band]) -> Mapping[str, Band]:
        return _read_only(value)


Hierarchy = tuple[RecordLabel, ...]
