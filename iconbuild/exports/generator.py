"""Weight/style entry generation from the generated icon tree.

The export set is re-derived from raw source names and the modules actually
present on disk, not from the synthesis pass's in-memory results, so icons
that failed to generate in any style never reach an entry module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Set

from ..models.export import ExportCandidate, ExportPlan
from ..models.icon import DevAllowList
from ..naming import canonicalize
from ..synthesize.source import SourceStore
from .template import entry_values, render_entry


class ArtifactStore(Protocol):
    def exists(self, style: str, weight: int, file_slug: str) -> bool:
        ...


class DiskArtifactStore:
    """Looks up ``<output>/<style>/w<weight>/<slug>.ts``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def exists(self, style: str, weight: int, file_slug: str) -> bool:
        return (self.output_dir / style / f"w{weight}" / f"{file_slug}.ts").is_file()


def collect_candidates(
    store: SourceStore,
    styles: Iterable[str],
    weights: Iterable[int],
    allow_list: Optional[DevAllowList] = None,
) -> List[ExportCandidate]:
    """Canonicalize every raw source name, first-seen across buckets."""
    weights = list(weights)
    allowed: Optional[Set[str]] = None
    if allow_list is not None:
        allowed = set(allow_list.component_ids)

    seen: Set[str] = set()
    candidates: List[ExportCandidate] = []
    for style in styles:
        for weight in weights:
            for raw_name in store.list_names(style, weight):
                name = canonicalize(raw_name)
                if name.component_id in seen:
                    continue
                if allowed is not None and name.component_id not in allowed:
                    continue
                seen.add(name.component_id)
                candidates.append(
                    ExportCandidate(
                        raw_name=raw_name,
                        component_id=name.component_id,
                        file_slug=name.file_slug,
                    )
                )
    return candidates


def validate_exports(
    candidates: Sequence[ExportCandidate],
    artifacts: ArtifactStore,
    styles: Sequence[str],
    weights: Sequence[int],
) -> ExportPlan:
    """Keep, per weight, the candidates generated in every style at that weight.

    Each weight is checked on its own: full coverage at one weight does not
    admit an icon into another weight's entries.
    """
    by_weight: Dict[int, List[ExportCandidate]] = {}
    covered: Set[str] = set()
    for weight in weights:
        subset = [
            candidate
            for candidate in candidates
            if all(artifacts.exists(style, weight, candidate.file_slug) for style in styles)
        ]
        by_weight[weight] = subset
        covered.update(candidate.component_id for candidate in subset)

    validated = [candidate for candidate in candidates if candidate.component_id in covered]
    return ExportPlan(validated=validated, by_weight=by_weight)


def write_exports(
    plan: ExportPlan,
    template: str,
    output_dir: Path,
    styles: Sequence[str],
    default_weight: int,
    package_name: str = "material-symbols-react",
) -> List[Path]:
    """Write ``<style>/w<weight>.ts`` aggregators and ``<style>/index.ts`` entries."""
    written: List[Path] = []
    for style in styles:
        style_dir = output_dir / style
        style_dir.mkdir(parents=True, exist_ok=True)
        for weight, icons in plan.by_weight.items():
            if not icons:
                continue
            path = style_dir / f"w{weight}.ts"
            path.write_text(
                render_entry(template, entry_values(icons, style, weight, package_name)),
                encoding="utf-8",
            )
            written.append(path)

    if not plan.validated:
        return written

    default_icons = plan.for_weight(default_weight)
    for style in styles:
        path = output_dir / style / "index.ts"
        values = entry_values(default_icons, style, default_weight, package_name, main_entry=True)
        path.write_text(render_entry(template, values), encoding="utf-8")
        written.append(path)
    return written
