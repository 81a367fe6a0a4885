"""Pydantic models for iconbuild contracts."""

from .base import IconBuildModel
from .config import Config
from .icon import (
    BucketOutcome,
    CanonicalName,
    DevAllowList,
    RawIconRecord,
    StyleWeightMetadata,
    VariantKey,
)
from .export import ExportCandidate, ExportPlan
from .index import IconIndexEntry, IconPathRecord, IndexBuild
from .task import DtsTask, PoolResult

__all__ = [
    "Config",
    "IconBuildModel",
    "BucketOutcome",
    "CanonicalName",
    "DevAllowList",
    "RawIconRecord",
    "StyleWeightMetadata",
    "VariantKey",
    "ExportCandidate",
    "ExportPlan",
    "IconIndexEntry",
    "IconPathRecord",
    "IndexBuild",
    "DtsTask",
    "PoolResult",
]
