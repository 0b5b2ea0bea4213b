"""Timing harness comparing the flat-array kernels with NumPy.

Each kernel is timed with ``config.CHECK_PARAMS`` on and then off. This is the
one place the flag changes after import; the saved value is restored when the
measurement ends.
"""

from __future__ import annotations

import json
import logging
import os
import statistics
import time
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

import numpy as real_numpy

from . import array, config, linalg

LOGGER = logging.getLogger(__name__)

Kernel = Tuple[Callable[[List[float], List[float]], object], Callable[[real_numpy.ndarray, real_numpy.ndarray], real_numpy.ndarray]]


def _time_ms(fn: Callable[[], object], repeats: int) -> Tuple[float, object]:
    samples: List[float] = []
    result: object = None
    for _ in range(max(1, repeats)):
        start = time.perf_counter()
        result = fn()
        samples.append((time.perf_counter() - start) * 1000.0)
    return statistics.median(samples), result


def _matmul_mat4_batch(a: List[float], b: List[float]) -> List[float]:
    dest = array.new_array(len(a))
    for offset in range(0, len(a), 16):
        linalg.matmul_ex(a, offset, b, offset, 4, 4, 4, dest, offset)
    return dest


def _matmul_mat4_numpy(a: real_numpy.ndarray, b: real_numpy.ndarray) -> real_numpy.ndarray:
    # Row-major reshape of column-major data yields the transposes.
    a_t = a.reshape(-1, 4, 4)
    b_t = b.reshape(-1, 4, 4)
    return real_numpy.matmul(b_t, a_t).reshape(-1)


def _normalize_vec3_batch(a: List[float], _b: List[float]) -> List[float]:
    dest = array.new_array(len(a))
    for offset in range(0, len(a), 3):
        linalg.normalize_ex(a, offset, 3, dest, offset)
    return dest


def _normalize_vec3_numpy(a: real_numpy.ndarray, _b: real_numpy.ndarray) -> real_numpy.ndarray:
    vectors = a.reshape(-1, 3)
    return (vectors / real_numpy.linalg.norm(vectors, axis=1, keepdims=True)).reshape(-1)


KERNELS: Dict[str, Tuple[int, Kernel]] = {
    "add": (1, (array.add, real_numpy.add)),
    "mul_add": (1, (lambda a, b: array.mul_add(a, b, b), lambda a, b: a + b * b)),
    "lerp": (1, (lambda a, b: array.lerp(a, b, 0.25), lambda a, b: a * 0.75 + b * 0.25)),
    "matmul_mat4": (16, (_matmul_mat4_batch, _matmul_mat4_numpy)),
    "normalize_vec3": (3, (_normalize_vec3_batch, _normalize_vec3_numpy)),
}


def _bench_kernel(name: str, count: int, repeats: int, rng: real_numpy.random.Generator) -> Dict[str, float]:
    width, (kernel, reference) = KERNELS[name]
    a_np = rng.uniform(0.5, 2.0, size=count * width)
    b_np = rng.uniform(0.5, 2.0, size=count * width)
    a = a_np.tolist()
    b = b_np.tolist()

    saved = config.CHECK_PARAMS
    try:
        config.CHECK_PARAMS = True
        checked_ms, result = _time_ms(lambda: kernel(a, b), repeats)
        config.CHECK_PARAMS = False
        unchecked_ms, _ = _time_ms(lambda: kernel(a, b), repeats)
    finally:
        config.CHECK_PARAMS = saved
    numpy_ms, expected = _time_ms(lambda: reference(a_np, b_np), repeats)

    diff = real_numpy.asarray(result, dtype=real_numpy.float64) - expected
    return {
        "checked_ms": checked_ms,
        "unchecked_ms": unchecked_ms,
        "numpy_ms": numpy_ms,
        "linf": float(real_numpy.max(real_numpy.abs(diff))) if diff.size else 0.0,
    }


def run_benchmark(
    *,
    kernels: Sequence[str] | None = None,
    sizes: Sequence[int] = (16, 256, 4096),
    repeats: int = 5,
    output_dir: str | None = "reports",
    seed: int = 5042,
) -> Dict[str, object]:
    """Time each kernel at each size and optionally write JSON/Markdown reports."""

    names = list(KERNELS) if kernels is None else list(kernels)
    unknown = [name for name in names if name not in KERNELS]
    if unknown:
        raise ValueError(f"unknown kernels: {', '.join(unknown)}")

    rng = real_numpy.random.default_rng(seed)
    results: Dict[str, Dict[str, Dict[str, float]]] = {}
    for name in names:
        results[name] = {}
        for count in sizes:
            LOGGER.info("Benchmarking %s with %d elements", name, count)
            results[name][str(count)] = _bench_kernel(name, count, repeats, rng)

    metrics: Dict[str, object] = {
        "config": config.describe(),
        "repeats": repeats,
        "sizes": list(sizes),
        "kernels": results,
    }

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        with open(os.path.join(output_dir, "benchmark_report.json"), "w", encoding="utf-8") as fh:
            json.dump(metrics, fh, indent=2)
        _write_markdown_report(metrics, os.path.join(output_dir, "benchmark_report.md"))
    return metrics


def _write_markdown_report(metrics: Mapping[str, object], path: str) -> None:
    lines = ["# avm kernel benchmark", ""]
    settings = metrics.get("config", {})
    if isinstance(settings, Mapping):
        for key, value in settings.items():
            lines.append(f"- **{key}**: {value}")
        lines.append("")

    lines.append("| kernel | elements | checked (ms) | unchecked (ms) | numpy (ms) | max abs diff |")
    lines.append("|---|---:|---:|---:|---:|---:|")
    kernels = metrics.get("kernels", {})
    if isinstance(kernels, Mapping):
        for name, by_size in kernels.items():
            for count, row in by_size.items():
                lines.append(
                    "| {} | {} | {:.3f} | {:.3f} | {:.3f} | {:.2e} |".format(
                        name,
                        count,
                        row["checked_ms"],
                        row["unchecked_ms"],
                        row["numpy_ms"],
                        row["linf"],
                    )
                )
    with open(path, "w", encoding="utf-8") as fh:
        fh.write("\n".join(lines) + "\n")
