import typing as t

from bfsmaze.algorithms.frontier_queue import FrontierQueue
from bfsmaze.exceptions import InvalidGridStateError
from bfsmaze.world.cell import Cell
from bfsmaze.world.grid import Grid, GridState


def find_exit(grid: Grid) -> Cell | None:
    """Returns the lowest-cost reachable Open cell of the last row, or `None`.

    Candidates are scanned left to right and only a strictly lower cost replaces the
    current best, so the leftmost cell wins a tie.
    """
    if grid.state == GridState.UNSOLVED:
        raise InvalidGridStateError("Cannot select an exit before the maze is flooded")

    exit_cell: Cell | None = None
    best_cost: int | None = None
    for cell in grid.last_row():
        if cell.is_open and cell.reachable:
            if best_cost is None or (cell.cost is not None and cell.cost < best_cost):
                exit_cell = cell
                best_cost = cell.cost
    return exit_cell


def shortest_path(queue: FrontierQueue, exit_cell: Cell) -> t.List[Cell]:
    """Marks the path from the exit back to its entrance and returns it entrance first."""
    record = queue.find(exit_cell)
    if record is None:
        raise InvalidGridStateError(
            "Exit {} was never discovered by the flood".format(exit_cell.coords)
        )

    path: t.List[Cell] = []
    for ancestor in queue.ancestors(record.index):
        ancestor.cell.on_solution_path = True
        path.append(ancestor.cell)
    path.reverse()
    return path
