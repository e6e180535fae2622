import typing as t

from pydantic import BaseModel

from bfsmaze.data_models import GridCellModel


class MazeReport(BaseModel):
    rows: int
    """Number of rows of the maze"""

    cols: int
    """Number of columns of the maze"""

    has_solution: bool = False
    """Whether a reachable exit exists on the last row"""

    solution_cost: int | None = None
    """Number of steps from the nearest entrance to the selected exit
    """

    exit: GridCellModel | None = None
    """(row, col) of the selected exit, the leftmost among the cheapest ones
    """

    path: t.List[GridCellModel] = []
    """Cells of the solution path, from the entrance to the exit
    """

    reachable_count: int = 0
    """Number of Open cells the flood reached from any entrance
    """

    records_expanded: int = 0
    """Number of visit records the flood created, entrances included
    """
