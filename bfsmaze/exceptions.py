import typing as t


class MazeError(Exception):
    pass


class OutOfBoundsError(MazeError, IndexError):
    def __init__(self, cell: t.Tuple[int, int], rows: int, cols: int):
        super().__init__(
            "Cell {} is outside of a grid with {} rows and {} columns".format(
                cell, rows, cols
            )
        )
        self.cell = cell
        self.rows = rows
        self.cols = cols


class InvalidGridStateError(MazeError):
    pass


class GridTooLargeError(MazeError):
    def __init__(self, rows: int, cols: int, max_rows: int, max_cols: int):
        super().__init__(
            "A {}x{} maze does not fit the {}x{} grid bound".format(
                rows, cols, max_rows, max_cols
            )
        )
        self.rows = rows
        self.cols = cols
        self.max_rows = max_rows
        self.max_cols = max_cols


class MazeFormatError(MazeError, ValueError):
    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = "line {}: {}".format(line, message)
        super().__init__(message)
        self.line = line


class FrontierDisposedError(MazeError):
    pass


class ConfigError(MazeError):
    pass
