import typing as t

from bfsmaze.data_models import MazeConfigYamlModel
from bfsmaze.exceptions import GridTooLargeError, MazeFormatError
from bfsmaze.utils import utils
from bfsmaze.world.cell import KINDS_BY_GLYPH
from bfsmaze.world.grid import Grid


def read_maze(
    stream: t.TextIO,
    config: MazeConfigYamlModel | None = None,
    logger: utils.MazeLogger | None = None,
) -> Grid:
    """Reads a maze written with one character per cell, `#` for walls and `.` for
    open cells, one row per line.
    """
    if config is None:
        config = MazeConfigYamlModel()

    try:
        text = stream.read()
    except UnicodeDecodeError as err:
        raise MazeFormatError("maze is not valid text: {}".format(err)) from err

    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise MazeFormatError("maze is empty")

    cols = len(lines[0])
    if len(lines) > config.max_rows or cols > config.max_cols:
        raise GridTooLargeError(len(lines), cols, config.max_rows, config.max_cols)

    for r, line in enumerate(lines):
        if line == "":
            raise MazeFormatError("empty row", line=r + 1)
        if len(line) != cols:
            raise MazeFormatError(
                "row has {} cells, expected {}".format(len(line), cols), line=r + 1
            )

    grid = Grid.create(
        len(lines), cols, max_rows=config.max_rows, max_cols=config.max_cols
    )
    for r, line in enumerate(lines):
        for c, glyph in enumerate(line):
            kind = KINDS_BY_GLYPH.get(glyph)
            if kind is None:
                raise MazeFormatError(
                    "unexpected character {!r} at column {}".format(glyph, c + 1),
                    line=r + 1,
                )
            grid.set_kind(r, c, kind)

    utils.log(logger, "Maze of {}x{} cells loaded.".format(grid.rows, grid.cols))
    return grid


def read_maze_file(
    file_path: str,
    config: MazeConfigYamlModel | None = None,
    logger: utils.MazeLogger | None = None,
) -> Grid:
    with open(file_path, "r", encoding="utf-8") as stream:
        return read_maze(stream, config=config, logger=logger)
