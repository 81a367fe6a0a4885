"""Config model."""

from __future__ import annotations

from typing import List

from pydantic import Field, constr

from .base import IconBuildModel

NonEmptyStr = constr(min_length=1)


class Config(IconBuildModel):
    project_root: NonEmptyStr = Field(..., description="Project root directory")
    assets_dir: NonEmptyStr = Field(..., description="Bundled assets directory")
    source_root: NonEmptyStr = Field(..., description="Material Symbols SVG package root")
    output_dir: NonEmptyStr = Field(..., description="Generated TypeScript source directory")
    metadata_dir: NonEmptyStr = Field(..., description="Generated metadata directory")
    dist_dir: NonEmptyStr = Field(..., description="Type declaration output directory")
    category_path: NonEmptyStr = Field(..., description="Category table JSON path")
    dev_icons_path: NonEmptyStr = Field(..., description="Development allow-list JSON path")
    template_path: NonEmptyStr = Field(..., description="Entry template path")
    dts_config_path: NonEmptyStr = Field(..., description="Single-entry dts rollup config")
    logs_dir: NonEmptyStr = Field(..., description="Run log directory")
    styles: List[NonEmptyStr] = Field(default_factory=lambda: ["outlined", "rounded", "sharp"])
    weights: List[int] = Field(default_factory=lambda: [100, 200, 300, 400, 500, 600, 700])
    default_weight: int = 400
    dts_jobs: int = Field(4, ge=1)
    package_name: NonEmptyStr = "material-symbols-react"
    dev_mode: bool = False
