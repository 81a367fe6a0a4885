"""SVG markup helpers."""

from __future__ import annotations

import base64
import re

_PATH_D_RE = re.compile(r'<path[^>]*\sd="([^"]*)"[^>]*>')


def extract_path(markup: str) -> str:
    """Return the ``d`` attribute of the first ``<path>``, or "" if there is none."""
    match = _PATH_D_RE.search(markup)
    return match.group(1) if match else ""


def preview_base64(markup: str) -> str:
    """Encode a small black-on-white rendition of the markup for doc previews."""
    preview = (
        markup.replace("<svg", '<svg style="background-color: #fff;"', 1)
        .replace('width="48"', 'width="24"', 1)
        .replace('height="48"', 'height="24"', 1)
        .replace("\n", "", 1)
        .replace('fill="currentColor"', 'fill="#000"', 1)
    )
    return base64.b64encode(preview.encode("utf-8")).decode("ascii")
