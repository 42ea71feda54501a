"""Exceptions raised by the lifeboard core."""

from typing import Tuple


class LifeboardError(Exception):
    """Base class for recoverable lifeboard errors."""


class CellOutOfRangeError(LifeboardError, IndexError):
    """A cell edit addressed a position outside the board."""

    def __init__(self, pos: Tuple[int, int], dims: Tuple[int, int]) -> None:
        self.pos = pos
        self.dims = dims
        super().__init__(f"Position {pos} is outside a {dims[0]}x{dims[1]} board")


class PrefabPlaceError(LifeboardError):
    """A prefab could not be stamped onto the board."""


class PrefabOutOfBoundsError(PrefabPlaceError):
    """The rotated prefab would extend past the board edge."""

    def __init__(self, x_overflow: bool, y_overflow: bool) -> None:
        self.x_overflow = x_overflow
        self.y_overflow = y_overflow
        axes = [name for name, hit in (("x", x_overflow), ("y", y_overflow)) if hit]
        super().__init__(f"Prefab does not fit on the board (overflow on {', '.join(axes)})")


class CellOverlapError(PrefabPlaceError):
    """The prefab footprint already contains living cells."""

    def __init__(self) -> None:
        super().__init__("Prefab footprint overlaps living cells")


class FormatError(LifeboardError, ValueError):
    """Encoded board data is malformed or truncated."""
