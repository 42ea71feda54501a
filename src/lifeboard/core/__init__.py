"""Core simulation, prefab and persistence logic."""

from .array import GenericArray
from .board import Board, Cell, Pos
from .game import GameOfLife
from .prefabs import Prefab, PrefabCatalog, Rotation
from .codec import encode, decode, load_board, save_board
from .errors import (
    CellOutOfRangeError,
    CellOverlapError,
    FormatError,
    LifeboardError,
    PrefabOutOfBoundsError,
    PrefabPlaceError,
)

__all__ = [
    "GenericArray",
    "Board",
    "Cell",
    "Pos",
    "GameOfLife",
    "Prefab",
    "PrefabCatalog",
    "Rotation",
    "encode",
    "decode",
    "load_board",
    "save_board",
    "CellOutOfRangeError",
    "CellOverlapError",
    "FormatError",
    "LifeboardError",
    "PrefabOutOfBoundsError",
    "PrefabPlaceError",
]
