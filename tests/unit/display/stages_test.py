import io

from bfsmaze.display import stages
from bfsmaze.io.reader import read_maze
from bfsmaze.solver import solve_maze
from bfsmaze.world.grid import Grid


def solved(*rows: str) -> Grid:
    grid = read_maze(io.StringIO("\n".join(rows) + "\n"))
    solve_maze(grid)
    return grid


class TestStages:
    def test_format_cost(self):
        assert stages.format_cost(0) == "00"
        assert stages.format_cost(4) == "04"
        assert stages.format_cost(12) == "12"
        assert stages.format_cost(100) == "00"
        assert stages.format_cost(148) == "48"

    def test_stage_1(self):
        grid = solved(".#.", "...", ".#.")
        assert stages.render_stage_1(grid) == (
            "Stage 1\n"
            "=======\n"
            "maze has 3 rows and 3 columns\n"
            "..##..\n"
            "......\n"
            "..##..\n"
        )

    def test_full_report_with_solution(self):
        grid = solved(".#.", "...", ".#.")
        assert stages.render_report(grid) == (
            "Stage 1\n"
            "=======\n"
            "maze has 3 rows and 3 columns\n"
            "..##..\n"
            "......\n"
            "..##..\n"
            "\n"
            "Stage 2\n"
            "=======\n"
            "maze has a solution\n"
            "++##++\n"
            "++++++\n"
            "++##++\n"
            "\n"
            "Stage 3\n"
            "=======\n"
            "maze has solution with cost 2\n"
            "00##00\n"
            "++02++\n"
            "02##02\n"
            "\n"
            "Stage 4\n"
            "=======\n"
            "maze solution\n"
            "00##  \n"
            "..    \n"
            "02##  \n"
        )

    def test_report_without_solution(self):
        grid = solved("..", ".#", "##")
        report = stages.render_report(grid)
        assert "Stage 4" not in report
        assert report.endswith(
            "Stage 3\n"
            "=======\n"
            "maze has no solution\n"
            "0000\n"
            "++##\n"
            "####\n"
        )
        assert "Stage 2\n=======\nmaze has no solution\n" in report

    def test_unreachable_cells(self):
        grid = solved(".##", ".#.", "..#")
        assert stages.render_stage_2(grid).endswith("++####\n++##--\n++++##\n")
        assert stages.render_stage_4(grid).endswith("00####\n..##--\n02  ##\n")

    def test_write_report(self):
        grid = solved("..")
        stream = io.StringIO()
        stages.write_report(grid, stream)
        assert stream.getvalue() == stages.render_report(grid)
        assert stream.getvalue().endswith("maze solution\n00  \n")
