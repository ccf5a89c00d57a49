"""Validated hex grid configuration and a small facade built on it.

``HexGridConfig`` bundles the three things every world-space query needs:
the coordinate system the tilemap uses, the world size of one cell, and the
map dimensions.  The configuration can be persisted as JSON.  By default the
file lives in the per-user configuration directory reported by
:func:`platformdirs.user_config_dir`; writes go through a temporary file that
is then renamed over the target.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Iterator

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .hex_grid.coord_system import HexCoordSystem, center_in_world, tile_from_world_pos, to_axial
from .hex_grid.axial import Vec2
from .hex_grid.neighbors import neighbor_tiles
from .tiles import TilemapGridSize, TilemapSize, TilePos

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "hex_grid.json"


class HexGridConfig(BaseModel):
    """Coordinate system, cell size and map dimensions of a hex tilemap."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    coord_system: HexCoordSystem = Field(default=HexCoordSystem.ROW)
    grid_size: TilemapGridSize = Field(default_factory=TilemapGridSize)
    map_width: int = Field(default=16, ge=1)
    map_height: int = Field(default=16, ge=1)

    @property
    def map_size(self) -> TilemapSize:
        return TilemapSize(self.map_width, self.map_height)


class HexGrid:
    """Tile-level queries for a tilemap described by a :class:`HexGridConfig`."""

    def __init__(self, config: HexGridConfig | None = None) -> None:
        self.config = config or HexGridConfig()
        self.map_size = self.config.map_size

    def center_in_world(self, tile_pos: TilePos) -> Vec2:
        return center_in_world(tile_pos, self.config.grid_size, self.config.coord_system)

    def tile_at(self, world_pos: Sequence[float]) -> TilePos | None:
        return tile_from_world_pos(
            world_pos, self.config.grid_size, self.map_size, self.config.coord_system
        )

    def neighbors(self, tile_pos: TilePos) -> Iterator[TilePos]:
        return neighbor_tiles(tile_pos, self.map_size, self.config.coord_system)

    def distance(self, a: TilePos, b: TilePos) -> int:
        system = self.config.coord_system
        return to_axial(a, system).distance_from(to_axial(b, system))


def default_config_path() -> Path:
    return Path(user_config_dir("hextile", appauthor=False)) / CONFIG_FILENAME


def load_config(path: Path | str | None = None) -> HexGridConfig:
    """Load a configuration file, falling back to defaults.

    A missing file yields the default configuration.  A file that cannot be
    parsed or fails validation is reported through the module logger and
    also yields the defaults.
    """

    path = Path(path) if path is not None else default_config_path()
    if not path.exists():
        logger.debug("No hex grid config at %s, using defaults", path)
        return HexGridConfig()
    try:
        return HexGridConfig.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Ignoring invalid hex grid config at %s: %s", path, exc)
        return HexGridConfig()


def save_config(config: HexGridConfig, path: Path | str | None = None) -> Path:
    """Write ``config`` as JSON and return the path written."""

    path = Path(path) if path is not None else default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    logger.debug("Saved hex grid config to %s", path)
    return path


__all__ = [
    "CONFIG_FILENAME",
    "HexGrid",
    "HexGridConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
