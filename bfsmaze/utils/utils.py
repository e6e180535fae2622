import logging
import typing as t
from datetime import datetime

import typer

from bfsmaze.data_models import GridCellModel


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class MazeLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp if timestamp is not None else timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)


class MazeLogger(list[MazeLog]):
    def __init__(
        self, printout: bool = False, python_logger: logging.Logger | None = None
    ):
        super(MazeLogger, self).__init__()
        self.printout = printout
        self.python_logger = python_logger

    def append(self, log: MazeLog):
        super(MazeLogger, self).append(log)
        if self.printout:
            # stdout carries the report
            typer.echo(str(log), err=True)
        if self.python_logger:
            self.python_logger.info(f"[bfsmaze]:[step={log.step}]: {log.message}")

    def messages(self) -> t.List[str]:
        return [log.message for log in self]


def log(logger: MazeLogger | None, message: str, step: int = 0):
    if logger is not None:
        logger.append(MazeLog(message, step))


def is_in_matrix(cell: GridCellModel, rows: int, cols: int) -> bool:
    return 0 <= cell[0] < rows and 0 <= cell[1] < cols
