import json
import os
from collections import Counter

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from chiton.dataset.test_maps import tests
from chiton.grid import expand_grid

STEP_NAMES = {(1, 0): 'right', (0, 1): 'down', (-1, 0): 'left', (0, -1): 'up'}


def path_risks(grid, path):
    """Risk paid on each step of path: the value of every cell entered after the start."""
    pts = np.asarray(path).reshape(-1, 2)
    arr = np.asarray(grid)
    return arr[pts[1:, 1], pts[1:, 0]]


def direction_counts(path_strs):
    """How many steps go right, down, left and up across JSON-encoded paths."""
    cnt = Counter({name: 0 for name in STEP_NAMES.values()})
    for s in path_strs:
        pts = np.array(json.loads(s)).reshape(-1, 2)
        for dx, dy in np.sign(np.diff(pts, axis=0)):
            cnt[STEP_NAMES[(int(dx), int(dy))]] += 1
    return dict(cnt)


def risk_histogram(grid, path) -> pd.DataFrame:
    """
    Count of each risk value 1-9 on the path against the whole grid.
    'path_share' / 'grid_share' below 1 means the path avoids that value.
    """
    values = range(1, 10)
    on_path = pd.Series(path_risks(grid, path)).value_counts().reindex(values, fill_value=0)
    in_grid = pd.Series(np.asarray(grid).ravel()).value_counts().reindex(values, fill_value=0)
    df = pd.DataFrame({'path': on_path, 'grid': in_grid})
    df.index.name = 'risk'
    df['path_share'] = df['path'] / max(df['path'].sum(), 1)
    df['grid_share'] = df['grid'] / max(df['grid'].sum(), 1)
    return df


def compute_path_stats(grid, path):
    """
    Summary of one cheapest path:
      steps          - cells entered
      total_risk     - sum of entered risks (the puzzle answer)
      mean_risk      - total_risk / steps
      grid_mean_risk - mean risk of the whole grid
      detour_ratio   - steps / Manhattan distance between the endpoints
      backtracks     - steps going left or up
    """
    risks = path_risks(grid, path)
    steps = len(risks)
    (x0, y0), (x1, y1) = path[0], path[-1]
    manhattan = abs(x1 - x0) + abs(y1 - y0)
    moves = direction_counts([json.dumps([list(p) for p in path])])

    return {
        'steps': steps,
        'total_risk': int(risks.sum()),
        'mean_risk': float(risks.mean()) if steps else 0.0,
        'grid_mean_risk': float(np.mean(grid)),
        'detour_ratio': steps / manhattan if manhattan else 1.0,
        'backtracks': moves['left'] + moves['up'],
    }


def summarize_benchmark(csv_path: str, maps=None) -> pd.DataFrame:
    """
    One row of path statistics per (map, expanded) in a benchmark CSV.
    Grids are rebuilt from the named sample maps.
    """
    maps = tests if maps is None else maps
    df = pd.read_csv(csv_path).drop_duplicates(['map', 'expanded'])

    rows = []
    for _, row in df.iterrows():
        path = [tuple(p) for p in json.loads(row['path'])]
        if not path:
            continue
        grid = maps[row['map']]['grid']
        if row['expanded']:
            grid = expand_grid(grid)
        stats = compute_path_stats(grid, path)
        rows.append({'map': row['map'], 'expanded': bool(row['expanded']), **stats})
    return pd.DataFrame(rows)


def plot_cumulative_risk(grid, path, save_path=None):
    """Cumulative risk against step number, next to the straight line of the grid's mean risk."""
    risks = path_risks(grid, path)
    steps = np.arange(1, len(risks) + 1)

    plt.figure()
    plt.plot(steps, np.cumsum(risks), label='cheapest path')
    plt.plot(steps, steps * float(np.mean(grid)), linestyle='--', label='grid mean risk')
    plt.xlabel('Step')
    plt.ylabel('Cumulative risk')
    plt.title('Risk along the cheapest path')
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Saved risk plot to {save_path}")


if __name__ == "__main__":
    csv_path = "./results/benchmark/chiton_results.csv"
    summary = summarize_benchmark(csv_path)
    print(summary.to_string(index=False))

    # sample cave, expanded: where the answer's risk comes from
    df = pd.read_csv(csv_path)
    row = df[(df['map'] == 'sample') & (df['expanded'])].iloc[0]
    path = [tuple(p) for p in json.loads(row['path'])]
    grid = expand_grid(tests['sample']['grid'])

    print(risk_histogram(grid, path).to_string())
    plot_cumulative_risk(grid, path, save_path=os.path.join(os.path.dirname(csv_path), 'cumulative_risk.png'))
