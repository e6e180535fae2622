import typing as t

from bfsmaze.algorithms.exit_selection import find_exit, shortest_path
from bfsmaze.algorithms.flood import flood_maze
from bfsmaze.report import MazeReport
from bfsmaze.utils import utils
from bfsmaze.world.cell import Cell
from bfsmaze.world.grid import Grid, GridState


def solve_maze(grid: Grid, logger: utils.MazeLogger | None = None) -> MazeReport:
    """Floods the maze, picks the best exit and marks the leftmost shortest path to it.

    The grid is left in the `SOLVED` state whether or not a solution exists.
    """
    queue = flood_maze(grid, logger)
    records_expanded = len(queue)
    path: t.List[Cell] = []
    try:
        exit_cell = find_exit(grid)
        if exit_cell is not None:
            path = shortest_path(queue, exit_cell)
            grid.has_solution = True
            grid.solution_cost = len(path) - 1
            utils.log(
                logger,
                "Exit {} selected with cost {}.".format(
                    exit_cell.coords, grid.solution_cost
                ),
            )
        else:
            utils.log(logger, "No reachable exit on the last row.")
    finally:
        queue.clear()
    grid.advance(GridState.TRAVERSED)

    return MazeReport(
        rows=grid.rows,
        cols=grid.cols,
        has_solution=grid.has_solution,
        solution_cost=grid.solution_cost,
        exit=path[-1].coords if path else None,
        path=[cell.coords for cell in path],
        reachable_count=sum(1 for cell in grid if cell.reachable),
        records_expanded=records_expanded,
    )
