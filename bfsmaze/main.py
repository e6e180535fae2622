import sys
import typing as t

import typer

from bfsmaze.data_models import MazeConfigYamlModel, maze_config_from_yaml
from bfsmaze.display.stages import render_report
from bfsmaze.exceptions import MazeError
from bfsmaze.io.reader import read_maze, read_maze_file
from bfsmaze.mapgen.mapgen import MazeGen
from bfsmaze.solver import solve_maze
from bfsmaze.utils import utils

app = typer.Typer()


@app.command()
def solve(
    maze_file: t.Annotated[t.Optional[str], typer.Argument()] = None,
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    verbose: t.Annotated[bool, typer.Option("--verbose")] = False,
    json_summary: t.Annotated[bool, typer.Option("--json")] = False,
):
    """Reads one maze (stdin when no file is given) and prints its four report stages."""
    try:
        config = (
            maze_config_from_yaml(config_file)
            if config_file
            else MazeConfigYamlModel()
        )
        logger = utils.MazeLogger(printout=verbose or config.verbose)

        if maze_file is None or maze_file == "-":
            grid = read_maze(sys.stdin, config=config, logger=logger)
        else:
            grid = read_maze_file(maze_file, config=config, logger=logger)
        report = solve_maze(grid, logger=logger)
    except (MazeError, OSError) as err:
        typer.echo("error: {}".format(err), err=True)
        raise typer.Exit(code=1)

    if json_summary or config.json_summary:
        typer.echo(report.model_dump_json(indent=2))
    else:
        typer.echo(render_report(grid), nl=False)


@app.command()
def gen_maze(
    height: int = 10,
    width: int = 10,
    open_ratio: float = 0.6,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
):
    """Prints a random maze in the format `solve` reads."""
    mg = MazeGen(height=height, width=width, open_ratio=open_ratio, seed=seed)
    mg.gen_map()
    mg.print_grid()


if __name__ == "__main__":
    app()
