from typing import Dict, List, Optional, Sequence, Tuple
from PIL import Image, ImageDraw
import csv
import os

from chiton.grid import Grid, MalformedInput, check_grid, parse_grid


def load_map(path: str) -> Grid:
    try:
        with open(path, 'r', encoding='ascii') as f:
            lines = [line.rstrip('\r\n') for line in f]
    except UnicodeDecodeError as e:
        raise MalformedInput(f"{path} contains non-ASCII bytes") from e
    while lines and not lines[-1]:
        lines.pop()                        # trailing blank lines
    return parse_grid(lines)               # row-major (y,x) order


def save_map_with_markers(
    grid: Grid,
    path: Optional[List[Tuple[int, int]]] = None,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
    scale: int = 4,
    filename: str = "cave.png"
) -> str:
    """
    Save the risk map as a PNG with:
    - each cell shaded by its risk (1 light ... 9 dark)
    - path cells in red
    - start cell outlined in green, goal cell outlined in blue
    Each cell is drawn as a scale x scale block. Returns the filename.
    """
    w, h = check_grid(grid)
    img = Image.new("RGB", (w * scale, h * scale), color=(255, 255, 255))
    draw = ImageDraw.Draw(img)
    path_set = set(path) if path else set()

    for y in range(h):
        for x in range(w):
            if (x, y) in path_set:
                fill = (255, 0, 0)
            else:
                shade = 255 - min(grid[y][x], 9) * 25
                fill = (shade, shade, shade)
            draw.rectangle([x * scale, y * scale, (x + 1) * scale - 1, (y + 1) * scale - 1], fill=fill)

    for center, color in [(start, (0, 255, 0)), (goal, (0, 0, 255))]:
        if center:
            cx, cy = center
            draw.rectangle([cx * scale, cy * scale, (cx + 1) * scale - 1, (cy + 1) * scale - 1], outline=color)
    img.save(filename)
    return filename


def save_results_to_csv(rows: Sequence[Dict[str, object]], output_path: str) -> str:
    """
    Write result rows (dicts sharing the same keys) to output_path, creating
    the parent directory if needed. Returns output_path.
    """
    if not rows:
        raise ValueError("no rows to write")
    out_dir = os.path.dirname(output_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(output_path, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

    return output_path
