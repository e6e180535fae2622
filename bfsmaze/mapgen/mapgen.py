import typing as t

import numpy as np
import numpy.typing as npt
import typer

from bfsmaze.world.cell import GLYPHS, CellKind
from bfsmaze.world.grid import Grid

WALL = int(CellKind.WALL)
OPEN = int(CellKind.OPEN)


class MazeGen:
    def __init__(
        self,
        height: int,
        width: int,
        open_ratio: float = 0.6,
        seed: t.Optional[int] = None,
    ):
        if height < 1 or width < 1:
            raise ValueError("A maze needs at least one row and one column")
        if not 0.0 <= open_ratio <= 1.0:
            raise ValueError("open_ratio must be within [0, 1]")
        self.height = height
        self.width = width
        self.open_ratio = open_ratio
        self.rng = np.random.default_rng(seed)
        self.map: npt.NDArray[np.int8] = np.full(
            (height, width), WALL, dtype=np.int8
        )

    def gen_map(self) -> npt.NDArray[np.int8]:
        self.map[:] = WALL
        open_cells = self.rng.random((self.height, self.width)) < self.open_ratio
        self.map[open_cells] = OPEN

        # at least one entrance
        if not (self.map[0] == OPEN).any():
            self.map[0][self.rng.integers(self.width)] = OPEN
        return self.map

    def to_grid(self) -> Grid:
        return Grid.from_array(self.map, max_rows=self.height, max_cols=self.width)

    def to_text(self) -> str:
        return "".join(
            "".join(GLYPHS[CellKind(int(e))] for e in r) + "\n" for r in self.map
        )

    def print_grid(self):
        typer.echo(self.to_text(), nl=False)
