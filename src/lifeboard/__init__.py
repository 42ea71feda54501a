"""Bounded Conway's Game of Life with rotatable prefabs and a compact save format."""

__version__ = "0.1.0"

from .core.board import Board, Cell, Pos
from .core.game import GameOfLife
from .core.prefabs import Prefab, PrefabCatalog, Rotation

__all__ = ["Board", "Cell", "Pos", "GameOfLife", "Prefab", "PrefabCatalog", "Rotation"]
