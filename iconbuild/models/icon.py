"""Per-icon contracts produced while reading and synthesizing source glyphs."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import ConfigDict, Field, constr

from .base import IconBuildModel

NonEmptyStr = constr(min_length=1)
Variant = Literal["outline", "fill"]
BucketStatus = Literal["success", "empty", "fatal"]


class RawIconRecord(IconBuildModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    raw_name: NonEmptyStr
    style: NonEmptyStr
    weight: int
    geometry: str


class CanonicalName(IconBuildModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    component_id: str
    file_slug: str


class VariantKey(IconBuildModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_name: NonEmptyStr
    variant: Variant


class StyleWeightMetadata(IconBuildModel):
    """What one (style, weight) bucket produced, in processing order."""

    style: NonEmptyStr
    weight: int
    component_ids: List[str] = Field(default_factory=list)
    raw_names: List[str] = Field(default_factory=list)
    raw_to_component: Dict[str, str] = Field(default_factory=dict)
    geometry: Dict[str, str] = Field(default_factory=dict)

    def add(self, record: RawIconRecord, name: CanonicalName) -> None:
        self.component_ids.append(name.component_id)
        self.raw_names.append(record.raw_name)
        self.raw_to_component[record.raw_name] = name.component_id
        self.geometry[record.raw_name] = record.geometry


class BucketOutcome(IconBuildModel):
    """Tagged result of synthesizing one bucket.

    ``empty`` is recoverable (the bucket directory is missing), ``fatal`` means
    the source data is unreadable and the run must stop.
    """

    status: BucketStatus
    metadata: StyleWeightMetadata
    warnings: List[str] = Field(default_factory=list)
    message: Optional[str] = None

    @property
    def is_fatal(self) -> bool:
        return self.status == "fatal"


class DevAllowList(IconBuildModel):
    raw_names: List[str] = Field(default_factory=list)
    component_ids: List[str] = Field(default_factory=list)
