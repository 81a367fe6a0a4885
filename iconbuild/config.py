"""Runtime configuration loader."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from .models.config import Config
from .models.icon import DevAllowList
from .naming import to_component_id

DEV_MODE_ENV = "ICON_LIMIT"
ENVIRONMENT_ENV = "ICONBUILD_ENV"
SOURCE_ROOT_ENV = "ICONBUILD_SOURCE_ROOT"


def _require_file(path: Path, label: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Missing {label}: {path}")


def _dev_mode_from_env() -> bool:
    return (
        os.environ.get(DEV_MODE_ENV, "").lower() == "true"
        or os.environ.get(ENVIRONMENT_ENV, "").lower() == "development"
    )


def load_config(
    project_root: Optional[Path] = None,
    dev_mode: Optional[bool] = None,
    source_root: Optional[Path] = None,
) -> Config:
    """Load configuration with canonical defaults and validate paths."""
    root = project_root or Path(__file__).resolve().parents[1]
    assets_dir = root / "assets"
    template_path = assets_dir / "templates" / "entry.template.ts"

    _require_file(template_path, "entry_template")

    if source_root is None:
        env_source = os.environ.get(SOURCE_ROOT_ENV)
        source_root = Path(env_source) if env_source else root / "node_modules" / "@material-symbols"

    output_dir = root / "src"
    return Config(
        project_root=str(root),
        assets_dir=str(assets_dir),
        source_root=str(source_root),
        output_dir=str(output_dir),
        metadata_dir=str(output_dir / "metadata"),
        dist_dir=str(root / "dist"),
        category_path=str(root / "data" / "current_versions.json"),
        dev_icons_path=str(assets_dir / "dev-icons.json"),
        template_path=str(template_path),
        dts_config_path=str(assets_dir / "rollup" / "dts.single.config.mjs"),
        logs_dir=str(root / "logs"),
        dev_mode=_dev_mode_from_env() if dev_mode is None else dev_mode,
    )


def load_dev_allow_list(path: Path) -> DevAllowList:
    """Load the development icon list in both raw and component-name form."""
    _require_file(path, "dev_icons")
    with open(path, "r", encoding="utf-8") as handle:
        raw_names = json.load(handle)
    if not isinstance(raw_names, list) or not all(isinstance(n, str) for n in raw_names):
        raise ValueError(f"Development icon list must be a JSON array of names: {path}")
    return DevAllowList(
        raw_names=raw_names,
        component_ids=[to_component_id(raw_name) for raw_name in raw_names],
    )
