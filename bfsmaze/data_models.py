import typing as t

import pydantic
import yaml
from pydantic import BaseModel, Field

from bfsmaze.exceptions import ConfigError

GridCellModel = t.Tuple[int, int]

MAX_ROWS = 100
MAX_COLS = 100


class MazeConfigYamlModel(BaseModel):
    max_rows: int = Field(default=MAX_ROWS, ge=1)
    max_cols: int = Field(default=MAX_COLS, ge=1)
    verbose: bool = False
    json_summary: bool = False


def maze_config_from_yaml(file_path: str) -> MazeConfigYamlModel:
    with open(file_path, "r") as stream:
        try:
            config = yaml.safe_load(stream)
        except yaml.YAMLError as err:
            raise ConfigError("{}: invalid YAML: {}".format(file_path, err)) from err
    if config is None:
        return MazeConfigYamlModel()
    if not isinstance(config, dict):
        raise ConfigError("{}: expected a mapping of settings".format(file_path))
    try:
        return MazeConfigYamlModel(**config)
    except pydantic.ValidationError as err:
        raise ConfigError("{}: {}".format(file_path, err)) from err
