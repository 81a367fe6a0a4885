"""Write the metadata directory consumed by icon pickers and search UIs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..models.index import IconPathRecord, IndexBuild

INDEX_FILE = "icon-index.json"
NAMES_FILE = "icon-names.json"
COMPONENTS_FILE = "component-names.json"
PATHS_DIR = "paths"


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=False)


def write_metadata(
    metadata_dir: Path, build: IndexBuild, path_records: Dict[str, IconPathRecord]
) -> int:
    """Write index, name lists and one path file per base icon.

    Returns the number of path files written.
    """
    _write_json(
        metadata_dir / INDEX_FILE,
        {name: entry.to_dict() for name, entry in build.index.items()},
    )
    _write_json(metadata_dir / NAMES_FILE, build.icon_names)
    _write_json(metadata_dir / COMPONENTS_FILE, build.component_names)

    paths_dir = metadata_dir / PATHS_DIR
    for base_name, record in path_records.items():
        _write_json(paths_dir / f"{base_name}.json", record)
    return len(path_records)
