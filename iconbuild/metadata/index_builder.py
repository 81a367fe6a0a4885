"""Merge per-bucket synthesis results into the icon lookup metadata."""

from __future__ import annotations

from typing import Dict, Iterable, Set

from ..models.icon import StyleWeightMetadata
from ..models.index import IconIndexEntry, IconPathRecord, IndexBuild
from ..naming import classify, is_fill
from .category import CategoryResolver


def build_index(
    buckets: Iterable[StyleWeightMetadata], resolver: CategoryResolver
) -> IndexBuild:
    """Build the name index, the public icon names and all component names.

    Buckets must be given in the fixed style x weight processing order. The
    first pass collects the complete raw -> component mapping so that every
    entry created in the second pass sees the final component id.
    """
    buckets = list(buckets)

    raw_to_component: Dict[str, str] = {}
    for bucket in buckets:
        raw_to_component.update(bucket.raw_to_component)

    index: Dict[str, IconIndexEntry] = {}
    for bucket in buckets:
        for raw_name in bucket.raw_names:
            # a bare "-fill" is not a fill variant and keeps its own entry
            if is_fill(raw_name):
                continue
            entry = index.get(raw_name)
            if entry is None:
                entry = IconIndexEntry(
                    name=raw_name,
                    icon_name=raw_to_component[raw_name],
                    category=resolver.resolve(raw_name),
                )
                index[raw_name] = entry
            entry.merge(bucket.style, bucket.weight)

    component_names: Set[str] = {entry.icon_name for entry in index.values()}
    component_names.update(
        component_id
        for raw_name, component_id in raw_to_component.items()
        if is_fill(raw_name)
    )

    return IndexBuild(
        index=index,
        icon_names=sorted(index),
        component_names=sorted(component_names),
    )


def build_path_records(buckets: Iterable[StyleWeightMetadata]) -> Dict[str, IconPathRecord]:
    """Re-key every bucket's path data as base name -> style -> variant -> weight."""
    records: Dict[str, IconPathRecord] = {}
    for bucket in buckets:
        for raw_name, geometry in bucket.geometry.items():
            key = classify(raw_name)
            by_style = records.setdefault(key.base_name, {})
            by_variant = by_style.setdefault(bucket.style, {})
            by_variant.setdefault(key.variant, {})[f"w{bucket.weight}"] = geometry
    return records


def count_generated_files(buckets: Iterable[StyleWeightMetadata]) -> int:
    return sum(len(bucket.component_ids) for bucket in buckets)

