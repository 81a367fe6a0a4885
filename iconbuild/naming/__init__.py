"""Raw icon name canonicalization and fill/outline classification."""

from .canonical import canonicalize, to_component_id, to_file_slug
from .variant import FILL_SUFFIX, classify, is_fill, strip_fill_suffix

__all__ = [
    "canonicalize",
    "to_component_id",
    "to_file_slug",
    "FILL_SUFFIX",
    "classify",
    "is_fill",
    "strip_fill_suffix",
]
