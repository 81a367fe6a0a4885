"""Icon lookup metadata: categories, name index and per-icon path data."""

from .category import UNCATEGORIZED, CategoryResolver, load_category_table
from .index_builder import build_index, build_path_records
from .writer import write_metadata

__all__ = [
    "UNCATEGORIZED",
    "CategoryResolver",
    "load_category_table",
    "build_index",
    "build_path_records",
    "write_metadata",
]
