#!/usr/bin/env python3
"""
Run every algorithm on the bundled insurance sample and write one HTML report
per algorithm next to the metric log.
"""

from __future__ import annotations

import os
import sys

# Add src to path for development
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from sortscope import ALGORITHMS, run_benchmark

DATASET = os.path.join(REPO_ROOT, "examples", "data", "insurance_sample.csv")
OUT_DIR = os.path.join(REPO_ROOT, "examples", "reports")


if __name__ == "__main__":
    os.makedirs(OUT_DIR, exist_ok=True)
    for name in ALGORITHMS:
        run_benchmark(
            DATASET,
            name,
            20,
            sorted_out=os.path.join(OUT_DIR, f"sorted_{name}.txt"),
            analysis_out=os.path.join(OUT_DIR, "analysis.txt"),
            seed=2025,
            html_out=os.path.join(OUT_DIR, f"{name}.html"),
        )
