"""Per-weight and default-weight entry modules for the generated icon tree."""

from .generator import (
    ArtifactStore,
    DiskArtifactStore,
    collect_candidates,
    validate_exports,
    write_exports,
)
from .template import PLACEHOLDERS, TemplateError, entry_values, render_entry

__all__ = [
    "ArtifactStore",
    "DiskArtifactStore",
    "collect_candidates",
    "validate_exports",
    "write_exports",
    "PLACEHOLDERS",
    "TemplateError",
    "entry_values",
    "render_entry",
]
