"""Entry template substitution."""

from __future__ import annotations

import re
from typing import Dict, Iterable

from ..models.export import ExportCandidate

PLACEHOLDERS = (
    "STYLE_TITLE",
    "WEIGHT_TITLE",
    "DOC_DESCRIPTION",
    "DOC_USAGE",
    "TYPE_EXPORT",
    "TYPE_PATH",
    "CREATOR_PATH",
    "ICON_EXPORTS",
)

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Z_]+)\}\}")


class TemplateError(ValueError):
    """The entry template and its substitution values do not line up."""


def render_entry(template: str, values: Dict[str, str]) -> str:
    """Substitute every ``{{NAME}}`` placeholder in the template."""
    for name in PLACEHOLDERS:
        if f"{{{{{name}}}}}" not in template:
            raise TemplateError(f"Entry template is missing placeholder {{{{{name}}}}}")

    unknown = sorted(set(_PLACEHOLDER_RE.findall(template)) - set(values))
    if unknown:
        raise TemplateError(f"No value for template placeholders: {', '.join(unknown)}")

    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], template)


def _icon_exports(icons: Iterable[ExportCandidate], weight: int) -> str:
    return "\n".join(
        f"export {{ default as {icon.component_id} }} from './w{weight}/{icon.file_slug}';"
        for icon in icons
    )


def entry_values(
    icons: Iterable[ExportCandidate],
    style: str,
    weight: int,
    package_name: str,
    main_entry: bool = False,
) -> Dict[str, str]:
    """Values for a ``<style>/w<weight>.ts`` aggregator or a ``<style>/index.ts`` entry."""
    style_title = style[:1].upper() + style[1:]
    if main_entry:
        return {
            "STYLE_TITLE": style_title,
            "WEIGHT_TITLE": f" (Weight {weight})",
            "DOC_DESCRIPTION": f"\n * Material Symbols {style} icons with default weight {weight}",
            "DOC_USAGE": (
                f"\n * For other weights, use: import {{ Home }} from '{package_name}/{style}/w700'"
                f"\n * For other styles, use: import {{ Home }} from '{package_name}/rounded'"
            ),
            "TYPE_EXPORT": "type { IconProps, IconComponent }",
            "TYPE_PATH": "../types",
            "CREATOR_PATH": "../createMaterialIcon",
            "ICON_EXPORTS": _icon_exports(icons, weight),
        }
    return {
        "STYLE_TITLE": style_title,
        "WEIGHT_TITLE": f" {weight}",
        "DOC_DESCRIPTION": f"\n * {style_title} style icons with weight {weight}",
        "DOC_USAGE": "",
        "TYPE_EXPORT": "*",
        "TYPE_PATH": "../types",
        "CREATOR_PATH": "../createMaterialIcon",
        "ICON_EXPORTS": _icon_exports(icons, weight),
    }
