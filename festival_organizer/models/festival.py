"""Raw festival records as delivered by the festivals API.

The API returns a flat JSON array of festivals, each with the bands that
played it and each band's record label::

    [
      {"name": "LOL-palooza",
       "bands": [{"name": "Jill Black", "recordLabel": "Fourth Woman Records"}]},
      {"bands": [{"name": "Propeller", "recordLabel": "Pacific Records"}]}
    ]

Any name may be missing or ``null``; both are normalised to ``""`` here so
the restructuring step never has to deal with ``None``.  A missing or
``null`` ``bands`` list becomes an empty list.  Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


class RawBand(BaseModel):
    """A band entry inside a festival, with the label that manages it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    record_label: str = Field(default="", alias="recordLabel")

    @field_validator("name", "record_label", mode="before")
    @classmethod
    def _normalise_name(cls, value: Any) -> Any:
        return _none_to_empty(value)


class RawFestival(BaseModel):
    """A festival as listed by the API, before regrouping."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    bands: list[RawBand] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _normalise_name(cls, value: Any) -> Any:
        return _none_to_empty(value)

    @field_validator("bands", mode="before")
    @classmethod
    def _normalise_bands(cls, value: Any) -> Any:
        return [] if value is None else value
