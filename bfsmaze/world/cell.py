import typing as t
from enum import IntEnum

from bfsmaze.data_models import GridCellModel


class CellKind(IntEnum):
    OPEN = 0
    WALL = 1


GLYPHS: t.Dict[CellKind, str] = {CellKind.OPEN: ".", CellKind.WALL: "#"}
KINDS_BY_GLYPH: t.Dict[str, CellKind] = {v: k for k, v in GLYPHS.items()}


class Cell:
    """One position of the maze together with the search state the flood writes into it.

    `cost` stays `None` until the flood first reaches the cell. `reachable` is raised by
    the neighbor that floods into the cell, so it is true for every Open cell connected to
    an entrance.
    """

    __slots__ = ("row", "col", "kind", "cost", "reachable", "on_solution_path")

    def __init__(self, row: int, col: int, kind: CellKind | None = None):
        self.row = row
        self.col = col
        self.kind = kind
        self.cost: int | None = None
        self.reachable = False
        self.on_solution_path = False

    @property
    def coords(self) -> GridCellModel:
        return (self.row, self.col)

    @property
    def is_open(self) -> bool:
        return self.kind == CellKind.OPEN

    @property
    def glyph(self) -> str:
        if self.kind is None:
            return "?"
        return GLYPHS[self.kind]

    def __repr__(self):
        return "Cell({}, {}, {}, cost={})".format(
            self.row, self.col, self.glyph, self.cost
        )
