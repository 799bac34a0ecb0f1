#!/usr/bin/env python3
"""
Sorting Trace Comparison - sortscope
====================================

Traces bubble, insertion and merge sort on the same small input, prints the
classification of each run and writes an HTML report with every step.
Then runs a scaling sweep to show how the recorded step counts grow.
"""

from __future__ import annotations

import os
import sys

# Add src to path for development
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from sortscope import analyze_scaling, compare_sorts


def main():
    print("🔄 Sorting Trace Comparison")
    print("=" * 50)

    results = compare_sorts(
        "5, 1, 4, 2, 8, 3",
        title="Bubble vs Insertion vs Merge",
        notes="Every comparison (bubble), shift (insertion) and merge choice is listed.",
        html_out="sorting_traces.html",
        json_out="sorting_traces.json",
    )

    for row in results.comparison_rows:
        print(f"{row['icon']} {row['algorithm']}: {row['steps']} steps, "
              f"{row['case']} ({row['description']}), efficiency {row['efficiency']}")

    print("\n📈 Step count scaling on random input")
    scaling = analyze_scaling([8, 16, 32, 64, 128], kind="random", seed=42)
    for key, family in scaling.families.items():
        slope = scaling.slopes[key]
        print(f"   {key}: slope ≈ {slope:.2f} -> {family}" if slope is not None else f"   {key}: {family}")

    return results


if __name__ == "__main__":
    main()
