"""Weight/style export plan contracts."""

from __future__ import annotations

from typing import Dict, List

from pydantic import ConfigDict, Field, constr

from .base import IconBuildModel

NonEmptyStr = constr(min_length=1)


class ExportCandidate(IconBuildModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    raw_name: NonEmptyStr
    component_id: NonEmptyStr
    file_slug: NonEmptyStr


class ExportPlan(IconBuildModel):
    """Icons whose modules exist in every style, per weight."""

    validated: List[ExportCandidate] = Field(default_factory=list)
    by_weight: Dict[int, List[ExportCandidate]] = Field(default_factory=dict)

    def for_weight(self, weight: int) -> List[ExportCandidate]:
        return self.by_weight.get(weight, [])
