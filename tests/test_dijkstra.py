"""
Shortest-path tests on the sample cave and small hand-built grids.
"""

import random

import pytest

from chiton.dataset.test_maps import tests
from chiton.dijkstra import (
    ALGORITHMS,
    dijkstra,
    dijkstra_indexed,
    dijkstra_path,
    get_neighbors,
    lowest_total_risk,
    solve_part1,
    solve_part2,
)
from chiton.grid import expand_grid, index_to_xy

SOLVERS = [dijkstra, dijkstra_indexed]


def _random_grid(seed, width, height):
    rng = random.Random(seed)
    return [[rng.randint(1, 9) for _ in range(width)] for _ in range(height)]


# ----------------------------------------------------
# Neighbors
# ----------------------------------------------------
def test_neighbors_of_corner_and_inner_cell():
    assert sorted(get_neighbors(0, 10, 10)) == [1, 10]
    assert sorted(get_neighbors(11, 10, 10)) == [1, 10, 12, 21]


def test_neighbors_of_last_cell_stay_inside():
    assert sorted(get_neighbors(99, 10, 10)) == [89, 98]


@pytest.mark.parametrize("width,height", [(1, 1), (1, 5), (5, 1), (3, 4), (10, 10)])
def test_neighbors_never_leave_grid(width, height):
    for index in range(width * height):
        x, y = index_to_xy(index, width)
        for nbr in get_neighbors(index, width, height):
            nx, ny = index_to_xy(nbr, width)
            assert 0 <= nx <= width - 1
            assert 0 <= ny <= height - 1
            assert abs(nx - x) + abs(ny - y) == 1


def test_row_ends_do_not_wrap():
    # the end of one row is not adjacent to the start of the next
    assert get_neighbors(2, 3, 2) == [1, 5]
    assert get_neighbors(3, 3, 2) == [0, 4]


# ----------------------------------------------------
# Solvers
# ----------------------------------------------------
@pytest.mark.parametrize("solve", SOLVERS)
def test_single_cell_costs_nothing(solve):
    assert solve([[5]]) == 0


@pytest.mark.parametrize("name", sorted(tests))
@pytest.mark.parametrize("algo", sorted(ALGORITHMS))
def test_known_maps(name, algo):
    case = tests[name]

    assert lowest_total_risk(case["grid"], algorithm=algo) == case["part1"]
    if case["part2"] is not None:
        assert lowest_total_risk(case["grid"], expand=True, algorithm=algo) == case["part2"]


def test_sample_parts():
    grid = tests["sample"]["grid"]

    assert solve_part1(grid) == 40
    assert solve_part2(grid) == 315


def test_start_cell_is_not_charged():
    assert dijkstra([[9, 1]]) == 1
    assert dijkstra([[1, 9]]) == 9


def test_path_may_move_up_and_left():
    grid = [
        [1, 1, 1, 1, 1],
        [9, 9, 9, 9, 1],
        [1, 1, 1, 1, 1],
        [1, 9, 9, 9, 9],
        [1, 1, 1, 1, 1],
    ]
    assert dijkstra(grid) == 16
    assert dijkstra_indexed(grid) == 16


def test_custom_start_and_goal():
    grid = tests["sample"]["grid"]

    assert dijkstra(grid, start=(0, 0), goal=(0, 0)) == 0
    assert dijkstra(grid, start=(0, 0), goal=(1, 0)) == 1
    assert dijkstra(grid, start=(9, 9), goal=(9, 9)) == 0


def test_endpoints_outside_grid_rejected():
    with pytest.raises(ValueError):
        dijkstra([[1, 1]], goal=(2, 0))


@pytest.mark.parametrize("solve", SOLVERS)
def test_deterministic(solve):
    grid = _random_grid(1, 30, 30)

    assert solve(grid) == solve(grid)


def test_variants_agree_on_random_grids():
    for seed in range(10):
        grid = _random_grid(seed, 12, 9)
        expected = dijkstra(grid)

        assert dijkstra_indexed(grid) == expected
        assert dijkstra_path(grid)[0] == expected


def test_raising_a_cell_never_lowers_the_cost():
    grid = _random_grid(7, 8, 8)
    base = dijkstra(grid)
    for y in range(8):
        for x in range(8):
            raised = [row[:] for row in grid]
            raised[y][x] = min(raised[y][x] + 3, 9)
            assert dijkstra(raised) >= base


def test_solve_does_not_mutate_grid():
    grid = tests["sample"]["grid"]
    before = [row[:] for row in grid]
    dijkstra(grid)
    dijkstra_indexed(expand_grid(grid))

    assert grid == before


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        lowest_total_risk([[1]], algorithm="bfs")


# ----------------------------------------------------
# Unreachable goal
# ----------------------------------------------------
def _cut_after(column):
    """Neighbor function with no edge between column and column + 1."""
    def neighbors(index, width, height):
        x, _ = index_to_xy(index, width)
        for nbr in get_neighbors(index, width, height):
            nx, _ = index_to_xy(nbr, width)
            if {x, nx} != {column, column + 1}:
                yield nbr
    return neighbors


@pytest.mark.parametrize("solve", SOLVERS + [dijkstra_path])
def test_unreachable_goal_returns_none(solve):
    grid = [[1, 2, 3, 4, 5]]

    assert solve(grid, neighbors=_cut_after(2)) is None


def test_cut_that_leaves_goal_connected():
    grid = [[1, 1, 1], [1, 1, 1]]

    # only the top row is cut
    def neighbors(index, width, height):
        for nbr in get_neighbors(index, width, height):
            if {index, nbr} != {0, 1}:
                yield nbr

    assert dijkstra(grid, neighbors=neighbors) == 3
    assert dijkstra_indexed(grid, neighbors=neighbors) == 3


# ----------------------------------------------------
# Path extension
# ----------------------------------------------------
def test_path_matches_cost():
    grid = tests["sample"]["grid"]
    cost, path = dijkstra_path(grid)

    assert cost == 40
    assert path[0] == (0, 0)
    assert path[-1] == (9, 9)
    assert sum(grid[y][x] for x, y in path[1:]) == cost
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x2 - x1) + abs(y2 - y1) == 1


def test_path_single_cell():
    assert dijkstra_path([[3]]) == (0, [(0, 0)])


def test_path_to_custom_goal():
    grid = tests["detour"]["grid"]
    cost, path = dijkstra_path(grid, start=(2, 2), goal=(4, 0))

    assert cost == dijkstra(grid, start=(2, 2), goal=(4, 0))
    assert path[0] == (2, 2)
    assert path[-1] == (4, 0)
    assert sum(grid[y][x] for x, y in path[1:]) == cost
