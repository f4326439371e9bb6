from chiton.grid import EXPANSION_FACTOR, Grid, MalformedInput, expand_grid, parse_grid
from chiton.dijkstra import dijkstra, dijkstra_indexed, dijkstra_path, lowest_total_risk, solve_part1, solve_part2

__version__ = "0.1.0"
