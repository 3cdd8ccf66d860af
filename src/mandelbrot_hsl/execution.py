"""Execution helpers for Mandelbrot CLI workflows."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .computation import render
from .config import RenderConfig, load_sweep_configs
from .output import save_image
from .report import RenderReport
from .timing import timer


def render_config(config: RenderConfig) -> RenderReport:
    """Render a configuration and write its image exactly once."""
    with timer() as wall:
        with timer() as compute:
            image, grid = render(
                config.bounds,
                config.resolution,
                config.max_iterations,
                config.engine,
            )
        compute_time = compute()

        with timer() as write:
            save_image(image, config.output_path)
        write_time = write()

    timing = {
        "compute_time": compute_time,
        "write_time": write_time,
        "wall_time": wall(),
    }
    return RenderReport(image=image, escape_times=grid, timing=timing)


def run_single_render(
    config: RenderConfig,
    suite_name: Optional[str] = None,
    *,
    track: bool = False,
) -> RenderReport:
    """Render a single configuration, reporting progress on stdout."""
    print(
        f"[Run] Starting render '{config.run_name}' "
        f"(resolution={config.resolution}, engine={config.engine}, "
        f"max_iterations={config.max_iterations})",
        flush=True,
    )

    report = render_config(config)

    print(f"[Output] Wrote {config.output_path}", flush=True)
    print(
        f"[Timing] Compute: {report.timing['compute_time']:.4f}s "
        f"Write: {report.timing['write_time']:.4f}s "
        f"Total: {report.timing['wall_time']:.4f}s",
        flush=True,
    )

    if track:
        from .logging import log_to_mlflow

        log_to_mlflow(config, report, suite_name or "default")

    return report


def run_sweep(
    config_path: str | Path | None,
    task_id: Optional[int] = None,
    suite_name: Optional[str] = None,
    configs: Optional[list[RenderConfig]] = None,
    descriptor: Optional[str] = None,
    *,
    track: bool = False,
) -> int:
    """Run a sweep defined in a YAML configuration file or a pre-loaded list."""
    if configs is None:
        if config_path is None:
            raise ValueError("config_path must be provided when configs is None")
        configs = load_sweep_configs(config_path)
        descriptor = descriptor or str(config_path)
    else:
        descriptor = descriptor or (str(config_path) if config_path else "sweep")

    if not configs:
        print("ERROR: No configurations found in sweep", file=sys.stderr)
        return 1

    if task_id is not None:
        if task_id < 0 or task_id >= len(configs):
            print(f"ERROR: task-id {task_id} out of range [0, {len(configs) - 1}]", file=sys.stderr)
            return 1
        config = configs[task_id]
        print(f"[Task {task_id}] Running: {config.run_name}")
        return 0 if _run_guarded(config, suite_name, track) else 1

    print("=" * 70)
    print(f"Running {len(configs)} configurations from {descriptor}")
    print("=" * 70)

    successes = 0
    failures: list[tuple[int, str]] = []

    for idx, cfg in enumerate(configs):
        print(f"\n[{idx + 1}/{len(configs)}] {cfg.run_name}")
        if _run_guarded(cfg, suite_name, track):
            successes += 1
        else:
            failures.append((idx, cfg.run_name))

    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)
    print(f"Total:      {len(configs)}")
    print(f"Successful: {successes}")
    print(f"Failed:     {len(failures)}")

    if failures:
        print("\nFailed configurations:")
        for idx, name in failures:
            print(f"  [{idx}] {name}")
        return 1

    return 0


def _run_guarded(config: RenderConfig, suite_name: Optional[str], track: bool) -> bool:
    """Run one sweep entry; a write failure only fails that entry."""
    try:
        run_single_render(config, suite_name, track=track)
    except OSError as exc:
        print(f"ERROR: cannot write image {config.output_path}: {exc}", file=sys.stderr)
        return False
    return True
