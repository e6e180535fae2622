"""
Text rendering of a solved maze in four stages.

Every cell is printed as two characters. Costs are printed modulo 100 on even depths
only, odd depths get a filler glyph.
"""

import typing as t

from bfsmaze.world.cell import Cell
from bfsmaze.world.grid import Grid

STAGE_HEADER = "Stage {}\n=======\n"
REACHABLE = "+"
UNREACHABLE = "-"
NONSOLUTION = " "
PATH = "."


def twice(glyph: str) -> str:
    return glyph + glyph


def format_cost(cost: int) -> str:
    value = cost % 100
    if value > 9:
        return "%2d" % value
    return "0%1d" % value


def render_map(grid: Grid, render_cell: t.Callable[[Cell], str]) -> str:
    return "".join(
        "".join(render_cell(cell) for cell in row) + "\n" for row in grid.cells
    )


def _layout_cell(cell: Cell) -> str:
    return twice(cell.glyph)


def _reachability_cell(cell: Cell) -> str:
    if not cell.is_open:
        return twice(cell.glyph)
    return twice(REACHABLE if cell.reachable else UNREACHABLE)


def _cost_cell(cell: Cell) -> str:
    if not cell.is_open or not cell.reachable:
        return _reachability_cell(cell)
    assert cell.cost is not None
    if cell.cost % 2 == 0:
        return format_cost(cell.cost)
    return twice(REACHABLE)


def _solution_cell(cell: Cell) -> str:
    if not cell.is_open or not cell.reachable:
        return _reachability_cell(cell)
    if not cell.on_solution_path:
        return twice(NONSOLUTION)
    assert cell.cost is not None
    if cell.cost % 2 == 0:
        return format_cost(cell.cost)
    return twice(PATH)


def render_stage_1(grid: Grid) -> str:
    return (
        STAGE_HEADER.format(1)
        + "maze has {} rows and {} columns\n".format(grid.rows, grid.cols)
        + render_map(grid, _layout_cell)
    )


def render_stage_2(grid: Grid) -> str:
    if grid.has_solution:
        headline = "maze has a solution\n"
    else:
        headline = "maze has no solution\n"
    return STAGE_HEADER.format(2) + headline + render_map(grid, _reachability_cell)


def render_stage_3(grid: Grid) -> str:
    if grid.has_solution:
        headline = "maze has solution with cost {}\n".format(grid.solution_cost)
    else:
        headline = "maze has no solution\n"
    return STAGE_HEADER.format(3) + headline + render_map(grid, _cost_cell)


def render_stage_4(grid: Grid) -> str:
    return (
        STAGE_HEADER.format(4) + "maze solution\n" + render_map(grid, _solution_cell)
    )


def render_report(grid: Grid) -> str:
    stages = [render_stage_1(grid), render_stage_2(grid), render_stage_3(grid)]
    if grid.has_solution:
        stages.append(render_stage_4(grid))
    return "\n".join(stages)


def write_report(grid: Grid, stream: t.TextIO):
    stream.write(render_report(grid))
