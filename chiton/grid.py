from typing import Iterable, List, Tuple

# A grid is a list of rows of per-cell risk values, in row-major (y, x) order.
Grid = List[List[int]]

# The puzzle tiles the cave 5 times along each axis.
EXPANSION_FACTOR = 5


class MalformedInput(ValueError):
    """Raised when text or a grid cannot form a rectangular grid of digits."""


# ----------------------------------------------------
# Grid Loading
# ----------------------------------------------------
def parse_grid(lines: Iterable[str]) -> Grid:
    """
    Turn digit-only lines into a grid of ints, one row per line.
    Every character must be a decimal digit and every row the same length.
    """
    grid: Grid = []
    for y, line in enumerate(lines):
        row = []
        for x, c in enumerate(line):
            if c not in "0123456789":
                raise MalformedInput(f"non-digit character {c!r} at row {y}, column {x}")
            row.append(int(c))
        grid.append(row)

    check_grid(grid)
    return grid


def check_grid(grid: Grid) -> Tuple[int, int]:
    """Validate grid shape and return (width, height)."""
    if not grid or not grid[0]:
        raise MalformedInput("grid is empty")
    width = len(grid[0])
    for y, row in enumerate(grid):
        if len(row) != width:
            raise MalformedInput(f"row {y} has length {len(row)}, expected {width}")
    return width, len(grid)


def grid_size(grid: Grid) -> Tuple[int, int]:
    return len(grid[0]), len(grid)


# ----------------------------------------------------
# Node Index Conversion
# ----------------------------------------------------
def xy_to_index(x: int, y: int, width: int) -> int:
    if x < 0 or y < 0 or x >= width:
        raise ValueError(f"({x}, {y}) is not a cell of a grid {width} wide")
    return y * width + x


def index_to_xy(index: int, width: int) -> Tuple[int, int]:
    if index < 0 or width <= 0:
        raise ValueError(f"invalid index {index} for width {width}")
    y, x = divmod(index, width)
    return x, y


# ----------------------------------------------------
# Grid Expansion
# ----------------------------------------------------
def expand_grid(grid: Grid, factor: int = EXPANSION_FACTOR) -> Grid:
    """
    Tile the grid factor x factor times. Tile (tx, ty) raises every value
    by tx + ty, wrapping 9 back round to 1. The input grid is not modified.
    """
    width, height = check_grid(grid)
    expanded: Grid = [[0] * (width * factor) for _ in range(height * factor)]

    for ty in range(factor):
        for tx in range(factor):
            offset = tx + ty
            for y, row in enumerate(grid):
                out_row = expanded[y + ty * height]
                for x, value in enumerate(row):
                    if offset == 0:
                        out_row[x + tx * width] = value
                    else:
                        out_row[x + tx * width] = (value - 1 + offset) % 9 + 1
    return expanded
