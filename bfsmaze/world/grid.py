import typing as t
from enum import Enum

import numpy as np
import numpy.typing as npt

from bfsmaze.data_models import MAX_COLS, MAX_ROWS
from bfsmaze.exceptions import (
    GridTooLargeError,
    InvalidGridStateError,
    OutOfBoundsError,
)
from bfsmaze.utils import utils
from bfsmaze.world.cell import Cell, CellKind

NOT_VISITED = -1


class GridState(Enum):
    UNSOLVED = "unsolved"
    TRAVERSED = "traversed"
    SOLVED = "solved"


_NEXT_STATE = {
    GridState.UNSOLVED: GridState.TRAVERSED,
    GridState.TRAVERSED: GridState.SOLVED,
}


class Grid:
    """A rectangular maze of cells.

    The grid owns its cells. Row 0 Open cells are the entrances and Open cells of the
    last row are candidate exits. Search state is only written by the flood and the
    path reconstruction, which move the grid through `GridState` one way.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        max_rows: int = MAX_ROWS,
        max_cols: int = MAX_COLS,
    ):
        if rows < 1 or cols < 1:
            raise ValueError(
                "A grid needs at least one row and one column, got {}x{}".format(
                    rows, cols
                )
            )
        if rows > max_rows or cols > max_cols:
            raise GridTooLargeError(rows, cols, max_rows, max_cols)
        self.rows = rows
        self.cols = cols
        self.cells: t.List[t.List[Cell]] = [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]
        self.has_solution = False
        self.solution_cost: int | None = None
        self.state = GridState.UNSOLVED

    @classmethod
    def create(
        cls, rows: int, cols: int, max_rows: int = MAX_ROWS, max_cols: int = MAX_COLS
    ) -> "Grid":
        return cls(rows, cols, max_rows=max_rows, max_cols=max_cols)

    @classmethod
    def from_array(
        cls,
        kinds: npt.NDArray[t.Any],
        max_rows: int = MAX_ROWS,
        max_cols: int = MAX_COLS,
    ) -> "Grid":
        if kinds.ndim != 2:
            raise ValueError("A maze layout must be a 2D array")
        rows, cols = kinds.shape
        grid = cls(rows, cols, max_rows=max_rows, max_cols=max_cols)
        for r in range(rows):
            for c in range(cols):
                grid.set_kind(r, c, CellKind(int(kinds[r][c])))
        return grid

    def cell_at(self, r: int, c: int) -> Cell:
        if not utils.is_in_matrix((r, c), self.rows, self.cols):
            raise OutOfBoundsError((r, c), self.rows, self.cols)
        return self.cells[r][c]

    def set_kind(self, r: int, c: int, kind: CellKind):
        cell = self.cell_at(r, c)
        if self.state != GridState.UNSOLVED:
            raise InvalidGridStateError(
                "Cannot change the layout of a grid in state '{}'".format(
                    self.state.value
                )
            )
        if cell.kind is not None:
            raise InvalidGridStateError(
                "Cell {} was already loaded as {}".format(cell.coords, cell.kind.name)
            )
        cell.kind = kind

    def validate(self):
        for cell in self:
            if cell.kind is None:
                raise InvalidGridStateError(
                    "Cell {} was never populated".format(cell.coords)
                )

    def advance(self, expected: GridState):
        """Moves the grid to the state following `expected`."""
        if self.state != expected:
            raise InvalidGridStateError(
                "Grid is '{}', expected '{}'".format(self.state.value, expected.value)
            )
        self.state = _NEXT_STATE[expected]

    def row(self, r: int) -> t.List[Cell]:
        if not 0 <= r < self.rows:
            raise OutOfBoundsError((r, 0), self.rows, self.cols)
        return self.cells[r]

    def last_row(self) -> t.List[Cell]:
        return self.cells[self.rows - 1]

    def entrances(self) -> t.List[Cell]:
        return [cell for cell in self.cells[0] if cell.is_open]

    def solution_path(self) -> t.List[Cell]:
        return [cell for cell in self if cell.on_solution_path]

    def copy_layout(self) -> "Grid":
        self.validate()
        return Grid.from_array(
            self.kind_array(), max_rows=self.rows, max_cols=self.cols
        )

    def kind_array(self) -> npt.NDArray[np.int8]:
        return np.array(
            [
                [NOT_VISITED if c.kind is None else int(c.kind) for c in row]
                for row in self.cells
            ],
            dtype=np.int8,
        )

    def cost_array(self) -> npt.NDArray[np.int32]:
        return np.array(
            [
                [NOT_VISITED if c.cost is None else c.cost for c in row]
                for row in self.cells
            ],
            dtype=np.int32,
        )

    def reachable_array(self) -> npt.NDArray[np.bool_]:
        return np.array(
            [[c.reachable for c in row] for row in self.cells], dtype=np.bool_
        )

    def solution_array(self) -> npt.NDArray[np.bool_]:
        return np.array(
            [[c.on_solution_path for c in row] for row in self.cells], dtype=np.bool_
        )

    def __iter__(self) -> t.Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __str__(self):
        return "\n".join("".join(c.glyph for c in row) for row in self.cells)
