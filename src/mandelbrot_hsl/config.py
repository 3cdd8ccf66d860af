"""Configuration objects and YAML loading for Mandelbrot renders."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from itertools import product
from pathlib import Path
from typing import Dict, List, Tuple

import yaml

from .geometry import MAX_ITERATIONS, Bounds, Complex

ENGINES = ("numba", "baseline")


@dataclass(frozen=True)
class RenderConfig:
    """Parameters of a single render."""

    bottom_left: Tuple[float, float] = (-2.0, -2.0)
    size: float = 4.0
    resolution: int = 1000
    max_iterations: int = MAX_ITERATIONS
    output: str = "out/fractal.png"  # may contain '{run_name}'
    engine: str = "numba"  # 'numba' or 'baseline'

    def __post_init__(self) -> None:
        if not self.size > 0:
            raise ValueError(f"size must be positive, got {self.size!r}")
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution!r}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations!r}")
        if self.engine not in ENGINES:
            raise ValueError(f"Unknown engine {self.engine!r}, expected one of {ENGINES}")

    @property
    def bounds(self) -> Bounds:
        return Bounds(Complex(*self.bottom_left), self.size)

    @property
    def run_name(self) -> str:
        """Generate unique run name embedding all parameters."""
        re, im = self.bottom_left
        return (
            f"{self.engine}_r{self.resolution}_i{self.max_iterations}_"
            f"re{re:g}_im{im:g}_s{self.size:g}"
        )

    @property
    def output_path(self) -> Path:
        return Path(self.output.format(run_name=self.run_name))

    def to_dict(self) -> dict:
        """Convert to dictionary for MLflow logging."""
        return asdict(self)

    def to_cli_args(self) -> List[str]:
        """Convert config to CLI arguments."""
        return [
            f"--bottom-left={self.bottom_left[0]}:{self.bottom_left[1]}",
            f"--size={self.size}",
            f"--resolution={self.resolution}",
            f"--max-iterations={self.max_iterations}",
            f"--output={self.output}",
            f"--engine={self.engine}",
        ]


DEFAULT_RENDER_CONFIG = RenderConfig()


def default_render_config(**overrides: object) -> RenderConfig:
    """Return the canonical default config optionally overridden with kwargs."""
    return replace(DEFAULT_RENDER_CONFIG, **_coerce_fields(overrides))


def load_sweep_configs(yaml_path: str | Path) -> List[RenderConfig]:
    """Load a YAML sweep file and generate all parameter combinations.

    Supports a top-level ``sweep`` as well as several named experiments
    nested under ``experiments``.
    """
    configs: List[RenderConfig] = []
    for _, suite_configs in load_named_sweep_configs(yaml_path):
        configs.extend(suite_configs)
    return configs


def get_config_by_index(yaml_path: str | Path, index: int) -> RenderConfig:
    """Get a specific config by index from sweep."""
    configs = load_sweep_configs(yaml_path)
    if index < 0 or index >= len(configs):
        raise ValueError(f"Config index {index} out of range [0, {len(configs) - 1}]")
    return configs[index]


def load_named_sweep_configs(
    yaml_path: str | Path,
    suite: str | None = None,
) -> List[tuple[str, List[RenderConfig]]]:
    with open(yaml_path) as f:
        cfg = yaml.safe_load(f) or {}

    defaults: Dict[str, object] = cfg.get("defaults", {}) or {}
    experiments = cfg.get("experiments")
    results: List[tuple[str, List[RenderConfig]]] = []

    if experiments:
        for exp in experiments:
            name = exp.get("name")
            if not name:
                continue
            if suite and name != suite:
                continue
            sweep = exp.get("sweep") or {}
            exp_defaults = {**defaults, **(exp.get("defaults", {}) or {})}
            results.append((name, _expand_sweep(exp_defaults, sweep)))
        if suite and not results:
            raise ValueError(f"Suite '{suite}' not found in {yaml_path}")
        return results

    sweep: Dict[str, object] = cfg.get("sweep", {}) or {}
    label = cfg.get("name") or Path(yaml_path).stem
    if suite and suite != label:
        raise ValueError(f"Suite '{suite}' not found in {yaml_path}")
    return [(label, _expand_sweep(defaults, sweep))]


def parse_pair(value: str) -> Tuple[float, float]:
    """Parse ``'re:im'`` into a float pair."""
    first, second = value.split(":")
    return float(first), float(second)


def _build_render_config(raw_data: Dict[str, object]) -> RenderConfig:
    return replace(DEFAULT_RENDER_CONFIG, **_coerce_fields(raw_data))


def _expand_sweep(defaults: Dict[str, object], sweep: Dict[str, object]) -> List[RenderConfig]:
    """Expand sweep definition into RenderConfig instances."""
    domains = sweep.get("domains") or [None]
    param_grid = {k: sweep[k] for k in sweep if k != "domains"}
    keys = list(param_grid.keys())

    configs: List[RenderConfig] = []
    for domain in domains:
        combos = product(*[_as_list(param_grid[k]) for k in keys]) if keys else [()]
        for combo in combos:
            data = {**defaults, **dict(zip(keys, combo))}
            if domain is not None:
                bottom_left, size = domain
                data["bottom_left"] = bottom_left
                data["size"] = size
            configs.append(_build_render_config(data))
    return configs


def _as_list(value: object) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _coerce_fields(data: Dict[str, object]) -> Dict[str, object]:
    result = dict(data)
    unknown = set(result) - set(RenderConfig.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    if "bottom_left" in result:
        result["bottom_left"] = _normalize_point(result["bottom_left"])
    if "size" in result:
        result["size"] = float(result["size"])
    if "resolution" in result:
        result["resolution"] = int(result["resolution"])
    if "max_iterations" in result:
        result["max_iterations"] = int(result["max_iterations"])
    if "output" in result:
        result["output"] = str(result["output"])
    return result


def _normalize_point(entry: object) -> Tuple[float, float]:
    if isinstance(entry, dict):
        re = entry.get("re")
        im = entry.get("im")
        if re is None or im is None:
            raise ValueError("bottom_left dict must include 're' and 'im'")
        return float(re), float(im)
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return float(entry[0]), float(entry[1])
    if isinstance(entry, str):
        return parse_pair(entry)
    raise ValueError(f"Unsupported point specification: {entry!r}")
