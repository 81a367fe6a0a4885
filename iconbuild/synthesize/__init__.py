"""Per-icon TypeScript module synthesis from Material Symbols SVG buckets."""

from .source import SourceStore
from .svg import extract_path, preview_base64
from .synthesizer import clean_generated_output, synthesize_all, synthesize_bucket

__all__ = [
    "SourceStore",
    "extract_path",
    "preview_base64",
    "clean_generated_output",
    "synthesize_all",
    "synthesize_bucket",
]
