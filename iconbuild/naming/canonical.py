"""Raw icon name -> component identifier and file slug.

Both values are pure functions of the raw name. Every (style, weight) pass
canonicalizes the same raw name independently, and the metadata merge relies
on those passes agreeing exactly.
"""

from __future__ import annotations

import re

from ..models.icon import CanonicalName

DIGIT_PREFIX = "Icon"

_SEPARATOR_RE = re.compile(r"[-_]")
_LEADING_DIGIT_RE = re.compile(r"^[0-9]")
_CASE_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def _title_segment(segment: str) -> str:
    """Uppercase the first letter of a segment and lowercase the rest.

    Digits before the first letter are kept as-is, so ``3d`` becomes ``3D``.
    """
    lowered = segment.lower()
    for index, char in enumerate(lowered):
        if char.isalpha():
            return lowered[:index] + char.upper() + lowered[index + 1 :]
    return lowered


def _candidate(raw_name: str) -> str:
    return "".join(_title_segment(part) for part in _SEPARATOR_RE.split(raw_name))


def to_component_id(raw_name: str) -> str:
    """Convert a raw icon name to a PascalCase identifier valid in JS/TS."""
    candidate = _candidate(raw_name)
    if _LEADING_DIGIT_RE.match(candidate):
        return DIGIT_PREFIX + candidate
    return candidate


def to_file_slug(raw_name: str) -> str:
    """Convert a raw icon name to the kebab-case stem of its module file."""
    if "-" in raw_name or "_" in raw_name:
        return raw_name.replace("_", "-")
    return _CASE_BOUNDARY_RE.sub(r"\1-\2", _candidate(raw_name)).lower()


def canonicalize(raw_name: str) -> CanonicalName:
    return CanonicalName(
        component_id=to_component_id(raw_name),
        file_slug=to_file_slug(raw_name),
    )
