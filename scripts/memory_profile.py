#!/usr/bin/env python3
"""
Memory profiling for long LifeState runs.

Recorded entries include the dead neighbors written by every transition, so
size() sits well above the live cell count. This script tracks both numbers
along with process RSS over many generations.
"""

import psutil
import os
import gc
import json
import sys
import time
import argparse
from typing import Dict, List

# Add repo root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sparselife.core.life_state import LifeState


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def profile_generations(width: int, height: int, generations: int, seed: int) -> Dict:
    """Advance a seeded state and sample entry counts and memory."""
    gc.collect()
    baseline_memory = measure_memory_mb()

    state = LifeState.random(width, height, seed=seed)
    samples: List[Dict] = []
    start = time.perf_counter()

    for generation in range(1, generations + 1):
        state = state.next_generation()
        samples.append({
            "generation": generation,
            "recorded": state.size(),
            "alive": state.live_count(),
            "memory_mb": round(measure_memory_mb(), 2),
        })

    elapsed = time.perf_counter() - start
    final = samples[-1] if samples else {"recorded": state.size(), "alive": state.live_count()}

    return {
        "viewport": [width, height],
        "generations": generations,
        "seed": seed,
        "baseline_memory_mb": round(baseline_memory, 2),
        "peak_memory_mb": max((s["memory_mb"] for s in samples), default=baseline_memory),
        "final_recorded": final["recorded"],
        "final_alive": final["alive"],
        "dead_entry_ratio": (1 - final["alive"] / final["recorded"]) if final["recorded"] else 0.0,
        "seconds_per_generation": elapsed / generations if generations else 0.0,
        "samples": samples,
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="LifeState memory profile")
    parser.add_argument("--width", type=int, default=204, help="Viewport width in cells")
    parser.add_argument("--height", type=int, default=153, help="Viewport height in cells")
    parser.add_argument("--generations", type=int, default=100, help="Generations to run")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--json", action="store_true", help="Print full report as JSON")
    args = parser.parse_args()

    report = profile_generations(args.width, args.height, args.generations, args.seed)

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(f"Viewport:            {args.width}x{args.height}")
        print(f"Generations:         {report['generations']}")
        print(f"Baseline memory:     {report['baseline_memory_mb']:8.1f} MB")
        print(f"Peak memory:         {report['peak_memory_mb']:8.1f} MB")
        print(f"Final alive cells:   {report['final_alive']:8d}")
        print(f"Final recorded:      {report['final_recorded']:8d}")
        print(f"Dead entry ratio:    {report['dead_entry_ratio']:8.1%}")
        print(f"Time per generation: {report['seconds_per_generation'] * 1000:8.2f} ms")
