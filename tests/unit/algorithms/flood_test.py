import io
import typing as t

import pytest

from bfsmaze.algorithms import flood
from bfsmaze.algorithms.flood import find_entries, flood_maze
from bfsmaze.exceptions import InvalidGridStateError
from bfsmaze.io.reader import read_maze
from bfsmaze.utils import utils
from bfsmaze.world.cell import CellKind
from bfsmaze.world.grid import Grid, GridState


def load(*rows: str) -> Grid:
    return read_maze(io.StringIO("\n".join(rows) + "\n"))


class TestFlood:
    def test_entrances_are_seeded_in_order(self):
        grid = load(".#..", "....")
        queue = find_entries(grid)
        assert [r.cell.coords for r in queue] == [(0, 0), (0, 2), (0, 3)]
        for cell in grid.entrances():
            assert cell.cost == 0
            assert cell.reachable

    def test_costs_and_reachability(self):
        grid = load(".#.", "...", ".#.")
        flood_maze(grid)
        assert grid.cost_array().tolist() == [[0, -1, 0], [1, 2, 1], [2, -1, 2]]
        assert grid.reachable_array().tolist() == [
            [True, False, True],
            [True, True, True],
            [True, False, True],
        ]
        assert grid.state == GridState.TRAVERSED

    def test_discovery_order_is_breadth_first(self):
        grid = load(".#.", "...", ".#.")
        queue = flood_maze(grid)
        coords = [r.cell.coords for r in queue]
        assert coords == [(0, 0), (0, 2), (1, 0), (1, 2), (1, 1), (2, 0), (2, 2)]
        depths = [r.cell.cost for r in queue]
        assert depths == sorted(depths)

    def test_first_discoverer_is_kept_as_parent(self):
        grid = load(".#.", "...", ".#.")
        queue = flood_maze(grid)
        middle = queue.find(grid.cell_at(1, 1))
        assert middle is not None
        assert queue.record(middle.parent).cell.coords == (1, 0)

    def test_each_cell_enqueued_once(self):
        grid = load("....", "....", "....")
        queue = flood_maze(grid)
        assert len(queue) == 12
        assert len({r.cell.coords for r in queue}) == 12

    def test_walls_are_never_visited(self):
        grid = load("..", "##", "..")
        queue = flood_maze(grid)
        assert len(queue) == 2
        for cell in grid:
            if cell.kind == CellKind.WALL:
                assert not cell.reachable
                assert cell.cost is None
        assert grid.cell_at(2, 0).cost is None
        assert not grid.cell_at(2, 1).reachable

    def test_disconnected_region(self):
        grid = load(".##", ".#.", "..#")
        flood_maze(grid)
        isolated = grid.cell_at(1, 2)
        assert not isolated.reachable
        assert isolated.cost is None

    def test_no_entrance(self):
        grid = load("##", "..")
        queue = flood_maze(grid)
        assert len(queue) == 0
        assert not grid.reachable_array().any()
        assert grid.state == GridState.TRAVERSED

    def test_flooding_twice_is_rejected(self):
        grid = load("..", "..")
        flood_maze(grid)
        with pytest.raises(InvalidGridStateError):
            flood_maze(grid)

    def test_unpopulated_grid_is_rejected(self):
        grid = Grid.create(2, 2)
        with pytest.raises(InvalidGridStateError):
            flood_maze(grid)

    def test_logs(self):
        logger = utils.MazeLogger()
        flood_maze(load(".#.", "...", ".#."), logger)
        assert logger.messages() == [
            "Seeded 2 entrance(s).",
            "Flood expanded 7 record(s).",
        ]


@pytest.mark.parametrize(
    "step", [flood.flood_up, flood.flood_down, flood.flood_left, flood.flood_right]
)
def test_direction_steps_take_integer_coordinates(step):
    hints = t.get_type_hints(step)
    assert hints["r"] is int
    assert hints["c"] is int
    assert hints["cost"] is int
    assert t.get_type_hints(flood.visit_cell)["cost"] is int
