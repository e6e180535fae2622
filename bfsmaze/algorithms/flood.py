"""
Breadth-first flood of a maze from all of its entrances at once.

Every Open cell of the first row is a root of the search. Water spreads one step per
depth level, each expanded cell trying its right, down, left and up neighbors in that
order. A neighbor's cost is only written when it was never reached or when the new depth
is strictly lower, which keeps the first-discovered parent of every cell.
"""

from bfsmaze.algorithms.frontier_queue import FrontierQueue, VisitRecord
from bfsmaze.exceptions import InvalidGridStateError
from bfsmaze.utils import utils
from bfsmaze.world.grid import Grid, GridState


def flood_maze(grid: Grid, logger: utils.MazeLogger | None = None) -> FrontierQueue:
    grid.validate()
    if grid.state != GridState.UNSOLVED:
        raise InvalidGridStateError(
            "Grid was already flooded (state '{}')".format(grid.state.value)
        )

    queue = find_entries(grid)
    utils.log(logger, "Seeded {} entrance(s).".format(len(queue)))

    expanded = 0
    for record in queue.iterate():
        expand_record(grid, queue, record)
        expanded += 1

    grid.advance(GridState.UNSOLVED)
    utils.log(logger, "Flood expanded {} record(s).".format(expanded), step=expanded)
    return queue


def find_entries(grid: Grid) -> FrontierQueue:
    entrances = grid.entrances()
    for cell in entrances:
        cell.reachable = True
        cell.cost = 0
    queue = FrontierQueue()
    queue.seed(entrances)
    return queue


def expand_record(grid: Grid, queue: FrontierQueue, record: VisitRecord):
    r, c = record.cell.coords
    assert record.cell.cost is not None
    cost = record.cell.cost + 1
    flood_right(grid, queue, record, r, c + 1, cost)
    flood_down(grid, queue, record, r + 1, c, cost)
    flood_left(grid, queue, record, r, c - 1, cost)
    flood_up(grid, queue, record, r - 1, c, cost)


# Each direction only checks the bound of the axis it moves along.


def flood_up(
    grid: Grid, queue: FrontierQueue, record: VisitRecord, r: int, c: int, cost: int
):
    if r >= 0 and grid.cells[r][c].is_open:
        visit_cell(grid, queue, record, r, c, cost)


def flood_down(
    grid: Grid, queue: FrontierQueue, record: VisitRecord, r: int, c: int, cost: int
):
    if r < grid.rows and grid.cells[r][c].is_open:
        visit_cell(grid, queue, record, r, c, cost)


def flood_left(
    grid: Grid, queue: FrontierQueue, record: VisitRecord, r: int, c: int, cost: int
):
    if c >= 0 and grid.cells[r][c].is_open:
        visit_cell(grid, queue, record, r, c, cost)


def flood_right(
    grid: Grid, queue: FrontierQueue, record: VisitRecord, r: int, c: int, cost: int
):
    if c < grid.cols and grid.cells[r][c].is_open:
        visit_cell(grid, queue, record, r, c, cost)


def visit_cell(
    grid: Grid, queue: FrontierQueue, record: VisitRecord, r: int, c: int, cost: int
):
    """Marks the cell reachable and enqueues it when `cost` improves on what it has."""
    cell = grid.cells[r][c]
    cell.reachable = True
    if cell.cost is None or cost < cell.cost:
        cell.cost = cost
        queue.append(record, cell)
