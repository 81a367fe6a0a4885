"""Icon metadata index contracts."""

from __future__ import annotations

from typing import Dict, List

from pydantic import Field, constr

from .base import IconBuildModel

NonEmptyStr = constr(min_length=1)

# style -> variant -> "w<weight>" -> path data
IconPathRecord = Dict[str, Dict[str, Dict[str, str]]]


class IconIndexEntry(IconBuildModel):
    name: NonEmptyStr = Field(..., description="Raw icon name")
    icon_name: NonEmptyStr = Field(..., alias="iconName", description="Component identifier")
    category: NonEmptyStr = "uncategorized"
    styles: List[str] = Field(default_factory=list)
    weights: Dict[str, List[int]] = Field(default_factory=dict)

    def merge(self, style: str, weight: int) -> None:
        if style not in self.styles:
            self.styles.append(style)
        style_weights = self.weights.setdefault(style, [])
        if weight not in style_weights:
            style_weights.append(weight)


class IndexBuild(IconBuildModel):
    index: Dict[str, IconIndexEntry] = Field(default_factory=dict)
    icon_names: List[str] = Field(default_factory=list)
    component_names: List[str] = Field(default_factory=list)
