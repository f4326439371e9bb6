# benchmark runner: times every algorithm on the sample maps, base and expanded
import json
import time
from typing import Dict, List, Optional, Tuple

from chiton.dataset.test_maps import tests
from chiton.dataset.utils import save_results_to_csv
from chiton.dijkstra import ALGORITHMS, dijkstra_path
from chiton.grid import Grid, expand_grid, grid_size

OUTPUT_CSV_PATH = "./results/benchmark/chiton_results.csv"


def time_algorithm(grid: Grid, algo: str, repeats: int = 1) -> Tuple[Optional[int], float]:
    """Run algo on grid repeats times; return its answer and the mean time in ms."""
    solve = ALGORITHMS[algo]
    cost = None
    t0 = time.time()
    for _ in range(repeats):
        cost = solve(grid)
    t1 = time.time()
    return cost, (t1 - t0) * 1000.0 / repeats


def run_benchmark(maps: Optional[Dict[str, Dict[str, object]]] = None,
                  algorithms: Optional[List[str]] = None,
                  output_csv: str = OUTPUT_CSV_PATH,
                  repeats: int = 1) -> str:
    maps = tests if maps is None else maps
    algorithms = algorithms or sorted(ALGORITHMS)
    for algo in algorithms:
        if algo not in ALGORITHMS:
            raise ValueError("Unknown algorithm: {}".format(algo))

    rows = []
    for name, case in maps.items():
        base = case["grid"]
        for expanded, grid in ((False, base), (True, expand_grid(base))):
            width, height = grid_size(grid)
            found = dijkstra_path(grid)
            path = found[1] if found else []
            for algo in algorithms:
                cost, elapsed_ms = time_algorithm(grid, algo, repeats)
                rows.append({
                    "map": name,
                    "expanded": expanded,
                    "width": width,
                    "height": height,
                    "cells": width * height,
                    "algo": algo,
                    "time_ms": f"{elapsed_ms:.3f}",
                    "cost": "" if cost is None else cost,
                    "path": json.dumps(path),
                })

    out_path = save_results_to_csv(rows, output_csv)
    print(f"Results written to {out_path}")
    return out_path


if __name__ == "__main__":
    run_benchmark(repeats=3)
