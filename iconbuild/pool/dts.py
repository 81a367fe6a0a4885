"""Type declaration tasks: one rollup-plugin-dts process per entry module."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ..models.config import Config
from ..models.task import DtsTask

CREATOR_MODULE = "createMaterialIcon.ts"


def _declaration_path(dist_dir: Path, relative: Path) -> Path:
    return dist_dir / relative.with_suffix(".d.ts")


def build_dts_tasks(config: Config) -> List[DtsTask]:
    """List every generated entry module present on disk with its .d.ts target."""
    output_dir = Path(config.output_dir)
    dist_dir = Path(config.dist_dir)

    entries = [Path(CREATOR_MODULE)]
    entries.extend(Path(style) / "index.ts" for style in config.styles)
    for weight in config.weights:
        entries.extend(Path(style) / f"w{weight}.ts" for style in config.styles)

    return [
        DtsTask(
            input_path=str(output_dir / relative),
            output_path=str(_declaration_path(dist_dir, relative)),
        )
        for relative in entries
        if (output_dir / relative).is_file()
    ]


class RollupDtsJob:
    """Runs ``rollup -c <config> --environment INPUT:<in>,OUTPUT:<out>``."""

    def __init__(
        self, config_path: Path, rollup: str = "rollup", cwd: Optional[Path] = None
    ) -> None:
        self.config_path = config_path
        self.rollup = rollup
        self.cwd = cwd

    def build_cmd(self, input_path: str, output_path: str) -> Sequence[str]:
        return [
            self.rollup,
            "-c",
            str(self.config_path),
            "--environment",
            f"INPUT:{input_path},OUTPUT:{output_path}",
        ]

    def __call__(self, input_path: str, output_path: str) -> int:
        try:
            proc = subprocess.run(
                self.build_cmd(input_path, output_path),
                cwd=str(self.cwd) if self.cwd else None,
            )
        except FileNotFoundError:
            return 127
        return proc.returncode
