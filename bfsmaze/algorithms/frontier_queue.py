"""
Frontier queue of the breadth-first flood.

The records are kept in a single append-only arena. Read in insertion order the arena is
the FIFO frontier; read through the `parent` indices it is a forest rooted at the maze
entrances, which is what the path reconstruction walks backwards.
"""

import typing as t
from dataclasses import dataclass
from typing import Optional

from bfsmaze.exceptions import FrontierDisposedError
from bfsmaze.world.cell import Cell


@dataclass
class VisitRecord:
    index: int
    cell: Cell
    parent: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.parent is None


class FrontierQueue:
    def __init__(self):
        self._records: t.List[VisitRecord] | None = []

    @property
    def records(self) -> t.List[VisitRecord]:
        if self._records is None:
            raise FrontierDisposedError("The frontier queue was already disposed")
        return self._records

    @property
    def disposed(self) -> bool:
        return self._records is None

    def seed(self, cells: t.Iterable[Cell]) -> t.List[VisitRecord]:
        """Adds one root record per cell, in the order the cells are given."""
        return [self.append(None, cell) for cell in cells]

    def append(self, parent: VisitRecord | None, cell: Cell) -> VisitRecord:
        records = self.records
        record = VisitRecord(
            index=len(records),
            cell=cell,
            parent=None if parent is None else parent.index,
        )
        records.append(record)
        return record

    def iterate(self) -> t.Iterator[VisitRecord]:
        """Yields the records in insertion order.

        Records appended while the iteration is running are yielded later in the same
        pass, so a single loop drains a frontier that keeps growing.
        """
        i = 0
        while i < len(self.records):
            yield self.records[i]
            i += 1

    def record(self, index: int) -> VisitRecord:
        return self.records[index]

    def find(self, cell: Cell) -> VisitRecord | None:
        for record in self.iterate():
            if record.cell is cell:
                return record
        return None

    def ancestors(self, index: int) -> t.Iterator[VisitRecord]:
        """Yields the record at `index`, then each of its ancestors up to the root."""
        current: int | None = index
        while current is not None:
            record = self.records[current]
            yield record
            current = record.parent

    def clear(self):
        self._records = None

    def __iter__(self) -> t.Iterator[VisitRecord]:
        return self.iterate()

    def __len__(self):
        return len(self.records)
