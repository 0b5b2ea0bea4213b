#!/usr/bin/env python3
"""Time the avm flat-array kernels against NumPy and write a report."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from avm.benchmark import KERNELS, run_benchmark


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("reports"),
        help="Directory where benchmark_report.json/.md are written.",
    )
    parser.add_argument(
        "--kernel",
        action="append",
        choices=sorted(KERNELS),
        help="Kernel to time; repeat to select several (default: all).",
    )
    parser.add_argument(
        "--size",
        action="append",
        type=int,
        help="Number of elements (or vectors/matrices) per run; repeatable.",
    )
    parser.add_argument("--repeats", type=int, default=5, help="Timed runs per measurement.")
    parser.add_argument("--seed", type=int, default=5042, help="Seed for the random inputs.")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    metrics = run_benchmark(
        kernels=args.kernel,
        sizes=args.size or (16, 256, 4096),
        repeats=args.repeats,
        output_dir=str(args.output),
        seed=args.seed,
    )
    print(json.dumps(metrics["kernels"], indent=2))


if __name__ == "__main__":
    main()
