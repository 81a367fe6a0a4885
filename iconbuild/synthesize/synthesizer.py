"""Icon artifact synthesis for one (style, weight) bucket.

Each source glyph becomes ``<output>/<style>/w<weight>/<slug>.ts`` exposing its
path data and a component built by ``createMaterialIcon``. The bucket's
``index.ts`` re-exports every produced module in processing order so that
regenerated trees diff cleanly.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.icon import (
    BucketOutcome,
    CanonicalName,
    DevAllowList,
    RawIconRecord,
    StyleWeightMetadata,
)
from ..naming import canonicalize
from .source import SourceStore
from .svg import extract_path, preview_base64

DEMO_URL = "https://marella.github.io/material-symbols/demo/"


def _render_icon_module(record: RawIconRecord, name: CanonicalName, markup: str) -> str:
    return f"""import createMaterialIcon from '../../createMaterialIcon';
const __iconData = "{record.geometry}";

/**
 * @component @name {name.component_id}
 * @description Material Symbols SVG icon component, renders SVG Element with children.
 *
 * @preview ![img](data:image/svg+xml;base64,{preview_base64(markup)}) - {DEMO_URL}#{record.raw_name}
 *
 * @param {{Object}} props - Material Symbols props and any valid SVG attribute
 * @returns {{JSX.Element}} JSX Element
 */
const {name.component_id} = createMaterialIcon("{record.raw_name}", __iconData);

export {{ __iconData, {name.component_id} as default }};
"""


def _render_bucket_index(
    exports: List[CanonicalName], style: str, weight: int, package_name: str
) -> str:
    lines = [
        f"// Auto-generated index file for {style} icons (weight {weight})",
        "// This file exports all icons in this directory for convenient importing",
        f"// Usage: import {{ Home, Settings }} from '{package_name}/{style}/w{weight}'",
        "",
    ]
    lines.extend(
        f"export {{ default as {name.component_id} }} from './{name.file_slug}';"
        for name in exports
    )
    return "\n".join(lines) + "\n"


def synthesize_bucket(
    store: SourceStore,
    style: str,
    weight: int,
    output_dir: Path,
    allow_list: Optional[DevAllowList] = None,
    package_name: str = "material-symbols-react",
) -> BucketOutcome:
    """Generate every icon module of one bucket plus its re-export index.

    A missing bucket is recoverable (``empty``); a glyph that cannot be read
    is ``fatal``, as are two glyphs sharing a component id or file slug; a
    glyph without path data is skipped with a warning.
    """
    metadata = StyleWeightMetadata(style=style, weight=weight)
    if not store.bucket_exists(style, weight):
        return BucketOutcome(
            status="empty",
            metadata=metadata,
            message=f"Source directory not found: {store.bucket_dir(style, weight)}",
        )

    raw_names = store.list_names(style, weight)
    if allow_list is not None:
        allowed = set(allow_list.raw_names)
        raw_names = [raw_name for raw_name in raw_names if raw_name in allowed]

    bucket_dir = output_dir / style / f"w{weight}"
    bucket_dir.mkdir(parents=True, exist_ok=True)

    warnings: List[str] = []
    exports: List[CanonicalName] = []
    # component id / file slug -> raw name that claimed it in this bucket
    claimed_ids: Dict[str, str] = {}
    claimed_slugs: Dict[str, str] = {}
    for raw_name in raw_names:
        try:
            markup = store.read(style, weight, raw_name)
        except (OSError, UnicodeDecodeError) as exc:
            return BucketOutcome(
                status="fatal",
                metadata=metadata,
                warnings=warnings,
                message=f"Cannot read {style}/w{weight}/{raw_name}.svg: {exc}",
            )

        geometry = extract_path(markup)
        if not geometry:
            warnings.append(f"Could not extract path from {raw_name}.svg")
            continue

        record = RawIconRecord(raw_name=raw_name, style=style, weight=weight, geometry=geometry)
        name = canonicalize(raw_name)
        clash = claimed_ids.get(name.component_id) or claimed_slugs.get(name.file_slug)
        if clash is not None:
            return BucketOutcome(
                status="fatal",
                metadata=metadata,
                warnings=warnings,
                message=(
                    f"Name collision in {style}/w{weight}: {raw_name!r} and {clash!r} "
                    f"both map to {name.component_id} ({name.file_slug}.ts)"
                ),
            )
        claimed_ids[name.component_id] = raw_name
        claimed_slugs[name.file_slug] = raw_name

        (bucket_dir / f"{name.file_slug}.ts").write_text(
            _render_icon_module(record, name, markup), encoding="utf-8"
        )
        metadata.add(record, name)
        exports.append(name)

    (bucket_dir / "index.ts").write_text(
        _render_bucket_index(exports, style, weight, package_name), encoding="utf-8"
    )
    return BucketOutcome(status="success", metadata=metadata, warnings=warnings)


def synthesize_all(
    store: SourceStore,
    styles: Iterable[str],
    weights: Iterable[int],
    output_dir: Path,
    allow_list: Optional[DevAllowList] = None,
    package_name: str = "material-symbols-react",
) -> Dict[Tuple[str, int], BucketOutcome]:
    """Synthesize every bucket, styles outer and weights inner.

    Stops after the first fatal bucket; its outcome is the last entry.
    """
    weights = list(weights)
    outcomes: Dict[Tuple[str, int], BucketOutcome] = {}
    for style in styles:
        for weight in weights:
            outcome = synthesize_bucket(
                store, style, weight, output_dir, allow_list, package_name
            )
            outcomes[(style, weight)] = outcome
            if outcome.is_fatal:
                return outcomes
    return outcomes


def clean_generated_output(output_dir: Path, styles: Iterable[str]) -> List[Path]:
    """Remove previously generated icon trees; return the removed directories."""
    removed: List[Path] = []
    for legacy in ("data", "icons"):
        legacy_dir = output_dir / legacy
        if legacy_dir.is_dir():
            shutil.rmtree(legacy_dir)
            removed.append(legacy_dir)

    for style in styles:
        style_dir = output_dir / style
        if not style_dir.is_dir():
            continue
        for item in sorted(style_dir.iterdir()):
            if item.is_dir() and item.name.startswith("w") and item.name[1:].isdigit():
                shutil.rmtree(item)
                removed.append(item)
    return removed
