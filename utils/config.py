# utils/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml

log = structlog.get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent.parent
CONFIG_FILE = PROJECT_DIR / "config" / "config.yaml"


def load_yaml_config(config_path: Path, config_name: str) -> Dict[str, Any]:
    """Loads a YAML configuration file."""
    config_path = Path(config_path)
    if not config_path.is_file():
        log.error(f"{config_name} config file not found", path=str(config_path))
        raise FileNotFoundError(f"{config_name} configuration file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error(
            f"Error parsing YAML for {config_name}",
            path=str(config_path),
            error=str(e),
            exc_info=True,
        )
        raise
    if config_data is None:
        log.warning(f"{config_name} config file is empty.", path=str(config_path))
        return {}
    if not isinstance(config_data, dict):
        log.error(f"{config_name} config is not a mapping", path=str(config_path))
        raise TypeError(f"{config_name} configuration must be a mapping: {config_path}")
    log.info(f"{config_name} config loaded", path=str(config_path))
    return config_data


@dataclass
class MazeConfig:
    width: int = 8
    height: int = 8
    algorithm: str = "recursivebacktracker"
    seed: Optional[int] = None
    resolution: int = 16
    max_steps: Optional[int] = None
    png_output: str = "maze.png"
    polar_png_output: str = "maze_polar.png"
    log_level: str = "info"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            log.error("Invalid maze dimensions in config", width=self.width, height=self.height)
            raise ValueError("Maze width and height must be positive integers.")
        if self.resolution <= 0:
            raise ValueError("Render resolution must be positive.")
        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError("max_steps must be positive when set.")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MazeConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.warning("Ignoring unknown config keys", keys=unknown)
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


def load_maze_config(config_path: Path = CONFIG_FILE) -> MazeConfig:
    return MazeConfig.from_dict(load_yaml_config(config_path, "Maze"))


__all__ = ["CONFIG_FILE", "MazeConfig", "load_maze_config", "load_yaml_config"]
