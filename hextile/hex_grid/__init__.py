from .axial import (
    COL_BASIS,
    COL_ORIENTATION,
    INV_COL_BASIS,
    INV_ROW_BASIS,
    ROW_BASIS,
    ROW_ORIENTATION,
    UNIT_Q,
    UNIT_R,
    UNIT_S,
    AxialPos,
    FractionalAxialPos,
    OrientationBasis,
)
from .conversions import (
    as_storage_index,
    axial_from_cube,
    axial_from_offset,
    cube_from_axial,
    offset_from_axial,
)
from .coord_system import HexCoordSystem, center_in_world, tile_from_world_pos
from .cube import CubePos, FractionalCubePos
from .neighbors import HexDirection, neighbor, neighbor_tiles, neighbors_axial, neighbors_of
from .offset import ColEvenPos, ColOddPos, RowEvenPos, RowOddPos

__all__ = [
    "AxialPos",
    "COL_BASIS",
    "COL_ORIENTATION",
    "ColEvenPos",
    "ColOddPos",
    "CubePos",
    "FractionalAxialPos",
    "FractionalCubePos",
    "HexCoordSystem",
    "HexDirection",
    "INV_COL_BASIS",
    "INV_ROW_BASIS",
    "OrientationBasis",
    "ROW_BASIS",
    "ROW_ORIENTATION",
    "RowEvenPos",
    "RowOddPos",
    "UNIT_Q",
    "UNIT_R",
    "UNIT_S",
    "as_storage_index",
    "axial_from_cube",
    "axial_from_offset",
    "center_in_world",
    "cube_from_axial",
    "neighbor",
    "neighbor_tiles",
    "neighbors_axial",
    "neighbors_of",
    "offset_from_axial",
    "tile_from_world_pos",
]
