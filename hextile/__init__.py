"""Hexagonal grid coordinate geometry for tilemaps."""

from .config import HexGrid, HexGridConfig, load_config, save_config
from .hex_grid import AxialPos, CubePos, HexCoordSystem
from .tiles import TilemapGridSize, TilemapSize, TilePos

__version__ = "0.1.0"

__all__ = [
    "AxialPos",
    "CubePos",
    "HexCoordSystem",
    "HexGrid",
    "HexGridConfig",
    "TilePos",
    "TilemapGridSize",
    "TilemapSize",
    "__version__",
    "load_config",
    "save_config",
]
