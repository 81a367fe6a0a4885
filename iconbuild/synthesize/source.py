"""Read-only access to the Material Symbols SVG package."""

from __future__ import annotations

from pathlib import Path
from typing import List


class SourceStore:
    """Glyph store laid out as ``<root>/svg-<weight>/<style>/<name>.svg``."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def bucket_dir(self, style: str, weight: int) -> Path:
        return self.root / f"svg-{weight}" / style

    def bucket_exists(self, style: str, weight: int) -> bool:
        return self.bucket_dir(style, weight).is_dir()

    def list_names(self, style: str, weight: int) -> List[str]:
        """Return raw icon names in the bucket, sorted for reproducible output."""
        bucket = self.bucket_dir(style, weight)
        if not bucket.is_dir():
            return []
        return sorted(path.stem for path in bucket.glob("*.svg"))

    def read(self, style: str, weight: int, raw_name: str) -> str:
        """Return the SVG markup; raises OSError when the file cannot be read."""
        return (self.bucket_dir(style, weight) / f"{raw_name}.svg").read_text(encoding="utf-8")
