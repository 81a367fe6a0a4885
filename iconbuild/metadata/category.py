"""Category lookup against the Material Symbols version table."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..naming import strip_fill_suffix

UNCATEGORIZED = "uncategorized"
KEY_SEPARATOR = "::"


def load_category_table(path: Path) -> Dict[str, Any]:
    """Load the ``category::name`` keyed table; an absent or broken file yields {}."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


class CategoryResolver:
    """Resolve raw icon names to categories, scanning the table once per name."""

    def __init__(self, table: Dict[str, Any]) -> None:
        self._entries: List[Tuple[str, str]] = []
        for key in table:
            if KEY_SEPARATOR in key:
                category, name = key.split(KEY_SEPARATOR, 1)
                self._entries.append((category, name))
        self._cache: Dict[str, str] = {}

    def _scan(self, raw_name: str) -> Optional[str]:
        base_name = strip_fill_suffix(raw_name)
        for category, name in self._entries:
            normalized = name.replace("_", "-")
            if name == raw_name or normalized == raw_name:
                return category
            if name == base_name or normalized == base_name:
                return category
        return None

    def resolve(self, raw_name: str) -> str:
        if raw_name not in self._cache:
            self._cache[raw_name] = self._scan(raw_name) or UNCATEGORIZED
        return self._cache[raw_name]

    @property
    def lookups(self) -> int:
        """Number of distinct names resolved so far."""
        return len(self._cache)
