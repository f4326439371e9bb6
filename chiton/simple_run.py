#!/usr/bin/env python3
import argparse
import os
import sys
import time
from typing import List, Optional

from chiton.dataset.utils import load_map, save_map_with_markers
from chiton.dijkstra import ALGORITHMS, dijkstra_path, lowest_total_risk
from chiton.grid import EXPANSION_FACTOR, MalformedInput, expand_grid, grid_size


def run_search(config) -> Optional[int]:
    """
    Solves the risk map in config["map"] with config["algorithm"], on the
    5x5 expanded cave when config["expand"] is set, and prints a report.
    If config["image"] is given the cave and a cheapest path are saved there.
    Returns the lowest total risk, or None if the goal is unreachable.
    """
    map_path  = config["map"]
    algo      = config.get("algorithm", "lazy")
    expand    = config.get("expand", False)
    image     = config.get("image")

    grid = load_map(map_path)
    width, height = grid_size(grid)

    t0 = time.time()
    cost = lowest_total_risk(grid, expand=expand, algorithm=algo)
    elapsed_ms = (time.time() - t0) * 1000.0

    if expand:
        width, height = width * EXPANSION_FACTOR, height * EXPANSION_FACTOR

    #  Report
    print(f"Algorithm        : {algo}")
    print(f"Map              : {map_path}")
    print(f"Size             : {width}x{height}{' (expanded)' if expand else ''}")
    print(f"Time             : {elapsed_ms:.2f} ms")
    if cost is None:
        print("No path found.")
    else:
        print(f"Lowest risk      : {cost}")

    if image:
        cave = expand_grid(grid) if expand else grid
        found = dijkstra_path(cave)
        path = found[1] if found else None
        save_map_with_markers(cave, path=path, start=(0, 0), goal=(width - 1, height - 1), filename=image)
        print(f"Saved map to {image}")

    return cost


def _image_name(image: Optional[str], part: int, n_parts: int) -> Optional[str]:
    """One PNG per part: cave.png becomes cave_part1.png and cave_part2.png when both run."""
    if not image or n_parts == 1:
        return image
    root, ext = os.path.splitext(image)
    return f"{root}_part{part}{ext or '.png'}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="chiton", description="Lowest total risk through a chiton cave.")
    parser.add_argument("map", help="puzzle input, one row of digits per line")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="lazy")
    parser.add_argument("--part", type=int, choices=[1, 2], default=None,
                        help="1: grid as given, 2: 5x5 expanded grid (default: both)")
    parser.add_argument("--image", default=None, help="save the cave and path as a PNG (one file per part when both run)")
    args = parser.parse_args(argv)

    parts = [args.part] if args.part else [1, 2]
    status = 0
    for part in parts:
        config = {
            "map"       : args.map,
            "algorithm" : args.algorithm,
            "expand"    : part == 2,
            "image"     : _image_name(args.image, part, len(parts)),
        }
        print(f"--- Part {part} ---")
        try:
            cost = run_search(config)
        except (MalformedInput, OSError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        if cost is None:
            status = 2
        print()
    return status


if __name__ == "__main__":
    sys.exit(main())
