import heapq
from typing import Callable, Iterable, List, Optional, Tuple

from chiton.grid import Grid, check_grid, expand_grid, index_to_xy, xy_to_index
from chiton.heap import IndexedMinHeap

# (index, width, height) -> neighbouring indices
NeighborFn = Callable[[int, int, int], Iterable[int]]

INFINITY = float("inf")


# ----------------------------------------------------
# Neighbors (4-connectivity)
# ----------------------------------------------------
def get_neighbors(index: int, width: int, height: int) -> List[int]:
    """
    Returns the flat indices of the up, left, down and right neighbors that
    lie inside the grid, i.e. 0 <= x <= width-1 and 0 <= y <= height-1.
    """
    x, y = index_to_xy(index, width)
    nbrs = []
    if y > 0:
        nbrs.append(index - width)
    if x > 0:
        nbrs.append(index - 1)
    if y < height - 1:
        nbrs.append(index + width)
    if x < width - 1:
        nbrs.append(index + 1)
    return nbrs


def _endpoints(grid: Grid, start: Tuple[int, int], goal: Optional[Tuple[int, int]]) -> Tuple[int, int, int, int, List[int]]:
    width, height = check_grid(grid)
    if goal is None:
        goal = (width - 1, height - 1)
    for x, y in (start, goal):
        if not (0 <= x <= width - 1 and 0 <= y <= height - 1):
            raise ValueError(f"({x}, {y}) lies outside the {width}x{height} grid")
    # flat copy of the costs, addressed by y * width + x
    risk = [value for row in grid for value in row]
    return width, height, xy_to_index(*start, width), xy_to_index(*goal, width), risk


# ----------------------------------------------------
# Dijkstra with a lazy-deletion heap
# ----------------------------------------------------
def _lazy_search(grid: Grid,
                 start: Tuple[int, int],
                 goal: Optional[Tuple[int, int]],
                 neighbors: Optional[NeighborFn],
                 came_from: Optional[list] = None) -> Optional[Tuple[int, int, int]]:
    """
    Returns (cost, goal index, width), or None if the goal is never finalized.
    When came_from is given it is filled with each node's predecessor.
    """
    neighbors = neighbors or get_neighbors
    width, height, source, target, risk = _endpoints(grid, start, goal)

    dist = [INFINITY] * (width * height)
    finalized = [False] * (width * height)
    if came_from is not None:
        came_from[:] = [None] * (width * height)
    dist[source] = 0
    open_list = [(0, source)]

    while open_list:
        d, current = heapq.heappop(open_list)
        if finalized[current] or d != dist[current]:
            continue
        finalized[current] = True

        if current == target:
            return d, target, width

        for nbr in neighbors(current, width, height):
            if finalized[nbr]:
                continue
            new_cost = d + risk[nbr]
            if new_cost < dist[nbr]:
                dist[nbr] = new_cost
                if came_from is not None:
                    came_from[nbr] = current
                heapq.heappush(open_list, (new_cost, nbr))

    return None


def dijkstra(grid: Grid,
             start: Tuple[int, int] = (0, 0),
             goal: Optional[Tuple[int, int]] = None,
             neighbors: Optional[NeighborFn] = None) -> Optional[int]:
    """
    Lowest total risk of any path from start to goal (default: top-left to
    bottom-right). Entering a cell costs that cell's value; the start cell is
    never charged. Returns None when the goal cannot be reached.

    Improvements push a fresh heap entry; entries whose distance no longer
    matches the best known one are skipped when popped.
    """
    found = _lazy_search(grid, start, goal, neighbors)
    return found[0] if found else None


# ----------------------------------------------------
# Dijkstra with decrease-key
# ----------------------------------------------------
def dijkstra_indexed(grid: Grid,
                     start: Tuple[int, int] = (0, 0),
                     goal: Optional[Tuple[int, int]] = None,
                     neighbors: Optional[NeighborFn] = None) -> Optional[int]:
    """Same contract as dijkstra(), using an indexed heap that updates priorities in place."""
    neighbors = neighbors or get_neighbors
    width, height, source, target, risk = _endpoints(grid, start, goal)

    dist = [INFINITY] * (width * height)
    finalized = [False] * (width * height)
    dist[source] = 0
    queue = IndexedMinHeap()
    queue.push(source, 0)

    while queue:
        current, d = queue.pop()
        finalized[current] = True

        if current == target:
            return d

        for nbr in neighbors(current, width, height):
            if finalized[nbr]:
                continue
            new_cost = d + risk[nbr]
            if new_cost < dist[nbr]:
                if nbr in queue:
                    queue.decrease_key(nbr, new_cost)
                else:
                    queue.push(nbr, new_cost)
                dist[nbr] = new_cost

    return None


# ----------------------------------------------------
# Dijkstra returning the path as well
# ----------------------------------------------------
def dijkstra_path(grid: Grid,
                  start: Tuple[int, int] = (0, 0),
                  goal: Optional[Tuple[int, int]] = None,
                  neighbors: Optional[NeighborFn] = None) -> Optional[Tuple[int, List[Tuple[int, int]]]]:
    """
    Like dijkstra(), but also reconstructs one cheapest path.
    Returns (cost, [(x, y), ...]) from start to goal inclusive, or None.
    """
    came_from: List[Optional[int]] = []
    found = _lazy_search(grid, start, goal, neighbors, came_from)
    if found is None:
        return None

    cost, node, width = found
    path = []
    while node is not None:
        path.append(index_to_xy(node, width))
        node = came_from[node]
    return cost, path[::-1]


ALGORITHMS = {
    "lazy": dijkstra,
    "indexed": dijkstra_indexed,
}


# ----------------------------------------------------
# Puzzle entry points
# ----------------------------------------------------
def lowest_total_risk(grid: Grid, expand: bool = False, algorithm: str = "lazy") -> Optional[int]:
    if algorithm not in ALGORITHMS:
        raise ValueError("Unknown algorithm: {}".format(algorithm))
    if expand:
        grid = expand_grid(grid)
    return ALGORITHMS[algorithm](grid)


def solve_part1(grid: Grid) -> Optional[int]:
    return lowest_total_risk(grid)


def solve_part2(grid: Grid) -> Optional[int]:
    return lowest_total_risk(grid, expand=True)
