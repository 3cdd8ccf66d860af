"""Mandelbrot escape-time renderer with an HSL palette."""

__version__ = "1.0.0"

# Pure-Python core and config - no JIT compilation on import
from .baseline import escape_time, orbit, render_baseline
from .config import RenderConfig, default_render_config
from .geometry import MAX_ITERATIONS, Bounds, Complex
from .palette import color_map, hsl_to_rgb
from .report import RenderReport


# Conditional imports - only loaded when needed
def __getattr__(name):
    """Lazy loading of heavy modules."""
    if name == "render":
        from .computation import render

        return render
    elif name == "log_to_mlflow":
        from .logging import log_to_mlflow

        return log_to_mlflow
    elif name == "load_sweep_configs":
        from .config import load_sweep_configs

        return load_sweep_configs
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MAX_ITERATIONS",
    "Complex",
    "Bounds",
    "orbit",
    "escape_time",
    "render_baseline",
    "color_map",
    "hsl_to_rgb",
    "RenderConfig",
    "default_render_config",
    "RenderReport",
    "render",
    "log_to_mlflow",
    "load_sweep_configs",
]
