"""Fill/outline variant classification by name suffix."""

from __future__ import annotations

from ..models.icon import VariantKey

FILL_SUFFIX = "-fill"


def is_fill(raw_name: str) -> bool:
    return raw_name.endswith(FILL_SUFFIX) and len(raw_name) > len(FILL_SUFFIX)


def strip_fill_suffix(raw_name: str) -> str:
    """Remove every trailing ``-fill`` suffix, never leaving an empty name."""
    name = raw_name
    while is_fill(name):
        name = name[: -len(FILL_SUFFIX)]
    return name


def classify(raw_name: str) -> VariantKey:
    """Split a raw icon name into its base glyph name and variant.

    A name that is exactly the suffix token is an outline icon with its
    literal name.
    """
    if is_fill(raw_name):
        return VariantKey(base_name=strip_fill_suffix(raw_name), variant="fill")
    return VariantKey(base_name=raw_name, variant="outline")
