"""
Configuration for feed rendering, loaded from YAML.
"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field


CONFIG_ENV_VAR = "FEEDWRITER_CONFIG"
DEFAULT_CONFIG_FILE = "feedwriter.yaml"


class RenderOptions(BaseModel):
    """Serialization options for rendered documents."""

    pretty: bool = True
    indent: str = "  "


class Config(BaseModel):
    log_level: str = "INFO"
    render: RenderOptions = Field(default_factory=RenderOptions)


def _config_path(path: Optional[Union[str, Path]]) -> Path:
    # Prefer an explicit path, then FEEDWRITER_CONFIG, then the working directory
    if path is not None:
        return Path(path)
    return Path(os.environ.get(CONFIG_ENV_VAR, Path.cwd() / DEFAULT_CONFIG_FILE))


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file. Defaults to $FEEDWRITER_CONFIG, then ./feedwriter.yaml

    Returns:
        Parsed configuration; defaults when the file does not exist.
    """
    config_path = _config_path(path)
    if not config_path.exists():
        return Config()
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Config.model_validate(data)
