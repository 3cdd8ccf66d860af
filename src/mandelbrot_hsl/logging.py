"""MLflow tracking for Mandelbrot renders."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Sequence

import mlflow
import pandas as pd
from matplotlib import pyplot as plt

from .config import RenderConfig
from .report import RenderReport

DEFAULT_TRACKING_URI = "mlruns"
EXPERIMENT_NAME = "mandelbrot_hsl"


def log_to_mlflow(
    config: RenderConfig,
    report: RenderReport,
    suite_name: str = "default",
) -> None:
    """Log a render to MLflow with its image, histogram and timings.

    Args:
        config: Render configuration
        report: Image, escape-time grid and timing stats of the render
        suite_name: Name of the sweep suite, used for tagging/filtering
    """
    if os.environ.get("SKIP_MLFLOW"):
        return

    mlflow.set_tracking_uri(_resolve_tracking_uri())
    mlflow.set_experiment(EXPERIMENT_NAME)

    with mlflow.start_run(run_name=config.run_name) as run:
        tags = {
            "node_name": os.uname().nodename,
            "suite": suite_name,
        }

        job_id = os.environ.get("LSB_JOBID")
        if job_id:
            tags["job_id"] = job_id

        mlflow.set_tags(tags)
        mlflow.log_params(config.to_dict())

        timing_stats = report.timing or {}
        metrics = {
            "wall_time": float(timing_stats.get("wall_time", 0.0)),
            "compute_time": float(timing_stats.get("compute_time", 0.0)),
            "write_time": float(timing_stats.get("write_time", 0.0)),
            "inside_fraction": report.inside_fraction,
        }
        for key, value in metrics.items():
            mlflow.log_metric(key, value)

        mlflow.log_table(_records_to_table(report.histogram_records()), "escape_times.json")
        mlflow.log_image(report.image, "images/fractal.png")

        fig, ax = plt.subplots(figsize=(6, 6))
        ax.imshow(report.image, extent=config.bounds.extent, origin="lower")
        ax.set_xlabel("Re(c)")
        ax.set_ylabel("Im(c)")
        mlflow.log_figure(fig, "figures/mandelbrot.png")
        plt.close(fig)

        print(f"[MLflow] Logged run: {config.run_name} (suite: {suite_name})")
        print(f"[MLflow] Run ID: {run.info.run_id}")


def _records_to_table(records: Sequence[Dict[str, Any]]) -> Dict[str, List[Any]]:
    """Convert row-wise records into MLflow table format."""
    frame = pd.DataFrame.from_records(records)
    return frame.to_dict(orient="list")


def _resolve_tracking_uri() -> str:
    """Resolve tracking URI."""
    return os.environ.get("MLFLOW_TRACKING_URI") or DEFAULT_TRACKING_URI
