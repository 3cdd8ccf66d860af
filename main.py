from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mandelbrot_hsl.config import ENGINES, default_render_config, load_named_sweep_configs, parse_pair
from mandelbrot_hsl.execution import run_single_render, run_sweep


def parse_args():
    parser = argparse.ArgumentParser(description="Render the Mandelbrot set with an HSL palette.")
    parser.add_argument("--sweep", type=str, help="Path to sweep YAML file")
    parser.add_argument("--suite", type=str, help="Name of suite/experiment within sweep file")
    parser.add_argument("--list-suites", action="store_true", help="List suites in sweep file")
    parser.add_argument("--task-id", type=int, help="Run specific config index (for HPC arrays)")
    parser.add_argument("--track", action="store_true", help="Log renders to MLflow")

    # Direct run parameters, defaulting to the full -2-2i..2+2i view
    parser.add_argument("--bottom-left", type=str, help="Bottom-left corner, e.g. --bottom-left=-2:-2")
    parser.add_argument("--size", type=float, help="Side length of the square viewport [4.0]")
    parser.add_argument("--resolution", type=int, help="Image width and height in pixels [1000]")
    parser.add_argument("--max-iterations", type=int, help="Iteration budget per pixel [100]")
    parser.add_argument("--output", type=str, help="Output image path [out/fractal.png]")
    parser.add_argument("--engine", type=str, choices=ENGINES, help="Escape-time engine [numba]")

    return parser.parse_args()


def main():
    args = parse_args()

    # Handle sweep runs
    if args.sweep:
        sweep_path = Path(args.sweep)

        if args.list_suites:
            suites = load_named_sweep_configs(sweep_path)
            for name, configs in suites:
                print(f"{name}: {len(configs)} configurations")
            return 0

        if args.task_id is not None and args.suite is None:
            sys.exit("ERROR: --task-id requires --suite")

        try:
            suites = load_named_sweep_configs(sweep_path, args.suite)
        except ValueError as exc:
            sys.exit(f"ERROR: {exc}")

        exit_code = 0
        for suite_name, configs in suites:
            descriptor = f"{sweep_path}::{suite_name}"
            rc = run_sweep(sweep_path, args.task_id, suite_name, configs, descriptor, track=args.track)
            exit_code = exit_code or rc
        return exit_code

    if args.suite or args.list_suites or args.task_id is not None:
        sys.exit("ERROR: --suite, --list-suites and --task-id require --sweep")

    overrides = {
        key: value
        for key, value in (
            ("size", args.size),
            ("resolution", args.resolution),
            ("max_iterations", args.max_iterations),
            ("output", args.output),
            ("engine", args.engine),
        )
        if value is not None
    }
    try:
        if args.bottom_left:
            overrides["bottom_left"] = parse_pair(args.bottom_left)
        config = default_render_config(**overrides)
    except ValueError as exc:
        sys.exit(f"ERROR: {exc}")

    try:
        run_single_render(config, None, track=args.track)
    except OSError as exc:
        sys.exit(f"ERROR: cannot write image {config.output_path}: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
