"""CLI entry point for the iconbuild pipeline."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .config import load_config, load_dev_allow_list
from .exports import (
    DiskArtifactStore,
    TemplateError,
    collect_candidates,
    validate_exports,
    write_exports,
)
from .logging_utils import RUN_LOG_NAME, log_event
from .metadata import (
    CategoryResolver,
    build_index,
    build_path_records,
    load_category_table,
    write_metadata,
)
from .metadata.index_builder import count_generated_files
from .models.config import Config
from .models.icon import DevAllowList
from .pool import RollupDtsJob, TaskPool, build_dts_tasks
from .synthesize import SourceStore, clean_generated_output, synthesize_all


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-root",
        type=str,
        default=None,
        help="Path to project root (default: auto-detect)",
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _load(args: argparse.Namespace) -> Config:
    dev_mode = True if getattr(args, "dev", False) else None
    return load_config(
        Path(args.project_root) if args.project_root else None, dev_mode=dev_mode
    )


def _log_path(config: Config) -> Path:
    return Path(config.logs_dir) / RUN_LOG_NAME


def _allow_list(config: Config) -> Optional[DevAllowList]:
    if not config.dev_mode:
        return None
    return load_dev_allow_list(Path(config.dev_icons_path))


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate per-icon modules for every style/weight and the metadata directory."""
    config = _load(args)
    log_path = _log_path(config)
    allow_list = _allow_list(config)
    output_dir = Path(config.output_dir)

    log_event(log_path, "GENERATE_START", {
        "source_root": config.source_root,
        "dev_mode": config.dev_mode,
    })
    if allow_list is not None:
        print(f"Development mode: limited to {len(allow_list.raw_names)} icons")

    for removed in clean_generated_output(output_dir, config.styles):
        print(f"Removed old generated directory: {removed}")

    store = SourceStore(Path(config.source_root))
    outcomes = synthesize_all(
        store,
        config.styles,
        config.weights,
        output_dir,
        allow_list,
        config.package_name,
    )

    for (style, weight), outcome in outcomes.items():
        bucket = f"{style}/w{weight}"
        for warning in outcome.warnings:
            print(f"WARNING: {bucket}: {warning}")
            log_event(log_path, "GLYPH_SKIPPED", {"bucket": bucket, "reason": warning})
        if outcome.status == "empty":
            print(f"WARNING: {outcome.message}")
            log_event(log_path, "BUCKET_MISSING", {"bucket": bucket, "message": outcome.message})
        elif outcome.is_fatal:
            print(f"ERROR: {outcome.message}")
            log_event(log_path, "GENERATE_FATAL", {"bucket": bucket, "message": outcome.message})
            return 1
        else:
            print(f"Processed {len(outcome.metadata.component_ids)} {style} icons (weight {weight})")
            log_event(log_path, "BUCKET_DONE", {
                "bucket": bucket,
                "icons": len(outcome.metadata.component_ids),
                "skipped": len(outcome.warnings),
            })

    category_path = Path(config.category_path)
    table = load_category_table(category_path)
    if not table:
        print(f"No category data loaded from {category_path}; icons are uncategorized")

    buckets = [outcome.metadata for outcome in outcomes.values()]
    build = build_index(buckets, CategoryResolver(table))
    path_files = write_metadata(Path(config.metadata_dir), build, build_path_records(buckets))

    log_event(log_path, "METADATA_DONE", {
        "icons": len(build.icon_names),
        "components": len(build.component_names),
        "path_files": path_files,
    })
    print(f"Unique icons: {len(build.icon_names)}")
    print(f"Component names (including fill variants): {len(build.component_names)}")
    print(f"Icon modules: {count_generated_files(buckets)}")
    print(f"Path data files: {path_files}")
    print(f"Metadata in: {config.metadata_dir}")
    return 0


def cmd_exports(args: argparse.Namespace) -> int:
    """Write per-weight aggregators and default-weight entries from the generated tree."""
    config = _load(args)
    log_path = _log_path(config)
    output_dir = Path(config.output_dir)

    store = SourceStore(Path(config.source_root))
    candidates = collect_candidates(
        store, config.styles, config.weights, _allow_list(config)
    )
    if not candidates:
        print(f"ERROR: No source icons found under {config.source_root}")
        return 1

    plan = validate_exports(
        candidates, DiskArtifactStore(output_dir), config.styles, config.weights
    )
    template = Path(config.template_path).read_text(encoding="utf-8")
    try:
        written = write_exports(
            plan,
            template,
            output_dir,
            config.styles,
            config.default_weight,
            config.package_name,
        )
    except TemplateError as exc:
        print(f"ERROR: {exc}")
        return 1

    for weight, icons in plan.by_weight.items():
        print(f"w{weight}: {len(icons)} icons in every style")
    log_event(log_path, "EXPORTS_DONE", {
        "candidates": len(candidates),
        "validated": len(plan.validated),
        "files": [str(path) for path in written],
    })
    print(f"Validated icons: {len(plan.validated)} of {len(candidates)}")
    print(f"Entry files written: {len(written)}")
    return 0


def cmd_dts(args: argparse.Namespace) -> int:
    """Extract type declarations, one rollup process per entry module."""
    config = _load(args)
    log_path = _log_path(config)

    jobs = config.dts_jobs if args.jobs is None else args.jobs
    if jobs < 1:
        print(f"ERROR: --jobs must be at least 1, got {jobs}")
        return 1

    dts_config = Path(config.dts_config_path)
    if not dts_config.exists():
        print(f"ERROR: dts rollup config not found: {dts_config}")
        return 1

    tasks = build_dts_tasks(config)
    if not tasks:
        print(f"ERROR: No entry modules found under {config.output_dir}")
        return 1

    log_event(log_path, "DTS_START", {"tasks": len(tasks), "jobs": jobs})
    print(f"Building {len(tasks)} declaration files with {jobs} parallel jobs")

    pool = TaskPool(RollupDtsJob(dts_config, cwd=Path(config.project_root)), jobs)
    result = pool.run(tasks)

    for task in result.failed:
        print(f"ERROR: Failed to build: {task.input_path} ({task.error})")
        log_event(log_path, "DTS_TASK_FAILED", {"input": task.input_path, "error": task.error})

    log_event(log_path, "DTS_DONE", {
        "succeeded": len(result.succeeded),
        "failed": len(result.failed),
        "not_started": len(result.pending),
    })
    if not result.ok:
        return 1
    print(f"Declarations written to: {config.dist_dir}")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Run generate -> exports -> dts, stopping at the first failure."""
    for step in (cmd_generate, cmd_exports, cmd_dts):
        code = step(args)
        if code != 0:
            return code
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="iconbuild - Material Symbols module generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Generate icon modules and metadata from SVG sources"
    )
    _add_common_args(generate_parser)
    generate_parser.add_argument(
        "--dev", action="store_true", help="Limit generation to the development icon list"
    )
    generate_parser.set_defaults(func=cmd_generate)

    exports_parser = subparsers.add_parser(
        "exports", help="Generate weight and style entry modules"
    )
    _add_common_args(exports_parser)
    exports_parser.add_argument(
        "--dev", action="store_true", help="Limit entries to the development icon list"
    )
    exports_parser.set_defaults(func=cmd_exports)

    dts_parser = subparsers.add_parser(
        "dts", help="Extract type declarations for every entry module"
    )
    _add_common_args(dts_parser)
    dts_parser.add_argument(
        "--jobs", type=_positive_int, default=None, help="Parallel rollup processes (default: 4)"
    )
    dts_parser.set_defaults(func=cmd_dts)

    build_all_parser = subparsers.add_parser(
        "build", help="Run generate, exports and dts in order"
    )
    _add_common_args(build_all_parser)
    build_all_parser.add_argument(
        "--dev", action="store_true", help="Limit the build to the development icon list"
    )
    build_all_parser.add_argument(
        "--jobs", type=_positive_int, default=None, help="Parallel rollup processes (default: 4)"
    )
    build_all_parser.set_defaults(func=cmd_build)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
