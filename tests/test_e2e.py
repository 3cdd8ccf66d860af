"""End-to-end tests via main.py."""
import os
import subprocess
import sys
from pathlib import Path

import numpy as np
from PIL import Image
from mandelbrot_hsl.baseline import escape_time
from mandelbrot_hsl.geometry import Bounds, Complex
from mandelbrot_hsl.palette import color_map

ROOT = Path(__file__).parent.parent


def _run(*args, cwd=ROOT):
    return subprocess.run(
        [sys.executable, str(ROOT / "main.py"), *args],
        cwd=cwd,
        env={**os.environ, "SKIP_MLFLOW": "1"},
        capture_output=True,
        text=True,
        timeout=300,
    )


def test_direct_render(tmp_path):
    output = tmp_path / "fractal.png"
    result = _run("--resolution=16", "--engine=baseline", f"--output={output}")
    assert result.returncode == 0, f"Render failed:\n{result.stdout}\n{result.stderr}"

    bounds = Bounds(Complex(-2.0, -2.0), 4.0)
    with Image.open(output) as written:
        assert written.mode == "RGB"
        assert written.size == (16, 16)
        pixels = np.asarray(written)
    for y in range(16):
        for x in range(16):
            c = bounds.value(x / 16, y / 16)
            assert tuple(pixels[y, x]) == color_map(escape_time(c))


def test_numba_engine_matches_baseline(tmp_path):
    outputs = []
    for engine in ("numba", "baseline"):
        output = tmp_path / f"{engine}.png"
        result = _run("--resolution=24", "--bottom-left=-1.5:-0.5", "--size=1", f"--engine={engine}", f"--output={output}")
        assert result.returncode == 0, result.stderr
        with Image.open(output) as written:
            outputs.append(np.asarray(written))
    np.testing.assert_array_equal(*outputs)


def test_write_failure_aborts(tmp_path):
    result = _run("--resolution=4", "--engine=baseline", f"--output={tmp_path / 'missing' / 'f.png'}")
    assert result.returncode != 0
    assert "ERROR: cannot write image" in result.stderr


def test_tests_suite(tmp_path):
    """Run TESTS suite end-to-end - should complete without errors."""
    (tmp_path / "out").mkdir()
    result = _run("--sweep", str(ROOT / "configs" / "renders.yaml"), "--suite", "TESTS", cwd=tmp_path)
    assert result.returncode == 0, f"Suite failed:\n{result.stdout}\n{result.stderr}"
    assert "Successful: 2" in result.stdout


def test_list_suites():
    result = _run("--sweep", str(ROOT / "configs" / "renders.yaml"), "--list-suites")
    assert result.returncode == 0
    assert "TESTS: 2 configurations" in result.stdout


def test_task_id_requires_suite():
    result = _run("--sweep", str(ROOT / "configs" / "renders.yaml"), "--task-id", "0")
    assert result.returncode != 0
    assert "--task-id requires --suite" in result.stderr
