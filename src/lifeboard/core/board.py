"""Two-dimensional board of Game of Life cells."""

from enum import IntEnum
from typing import Any, Iterator, List, NamedTuple, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .array import GenericArray

# Moore neighborhood, center excluded
_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Cell(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1

    def toggled(self) -> "Cell":
        """The opposite state."""
        return Cell.DEAD if self is Cell.ALIVE else Cell.ALIVE


class Pos(NamedTuple):
    """A grid coordinate, meaningful relative to a board's dims."""

    x: int
    y: int


class Board(GenericArray):
    """2D grid of cells with fixed width and height.

    Cells are stored as ``int8`` (0 dead, 1 alive) in an array indexed
    ``[x, y]``. Edges are hard boundaries: neighbor counting never wraps.
    """

    _dtype = np.int8

    def __init__(self, dims: Sequence[int], fill: Cell = Cell.DEAD) -> None:
        """Create a board filled with a single state.

        Args:
            dims: (width, height)
            fill: Initial state of every cell
        """
        if len(dims) != 2:
            raise ValueError(f"Board needs exactly 2 dimensions, got {len(dims)}")
        super().__init__(dims, int(fill))

    @classmethod
    def blank(cls, width: int, height: int) -> "Board":
        """Create an all-dead board."""
        return cls((width, height))

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        rng: Optional[np.random.Generator] = None,
        probability: float = 0.5,
    ) -> "Board":
        """Create a board where each cell is independently alive.

        Args:
            width: Number of columns
            height: Number of rows
            rng: Random source (a fresh default generator if omitted)
            probability: Chance each cell will be alive
        """
        if rng is None:
            rng = np.random.default_rng()
        mask = rng.random((width, height)) < probability
        return cls.from_array(mask.astype(np.int8))

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Sequence[Tuple[int, int]]) -> "Board":
        """Create a board with the given coordinates alive.

        Raises:
            IndexError: If a coordinate is outside the board
        """
        board = cls((width, height))
        for x, y in cells:
            board.set((x, y), Cell.ALIVE)
        return board

    @property
    def width(self) -> int:
        return self._dims[0]

    @property
    def height(self) -> int:
        return self._dims[1]

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._data))

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` addresses a cell of this board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def alive_cells(self) -> Iterator[Pos]:
        """Yield coordinates of living cells in linear order."""
        for (x, y), cell in self.iterate():
            if cell is Cell.ALIVE:
                yield Pos(x, y)

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Neighbors that would fall outside the board are not counted, so edge
        and corner cells have 5 and 3 candidates respectively.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx in [-1, 0, 1]:
            for dy in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    count += int(self._data[nx, ny] > 0)

        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            Array indexed ``[x, y]`` with the neighbor count of each cell
        """
        if self._data.size == 0:
            return np.zeros(self._dims, dtype=np.int8)

        # Board is (width, height) but conv2d expects (height, width)
        torch_input = torch.from_numpy((self._data.T > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(torch_input, _NEIGHBOR_KERNEL, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def render(self, dead: str = ".", alive: str = "*") -> List[str]:
        """Render each row as a string of glyphs."""
        rows = []
        for y in range(self.height):
            rows.append("".join(alive if self._data[x, y] else dead for x in range(self.width)))
        return rows

    def _item(self, value: Any) -> Cell:
        return Cell(int(value))

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join(self.render())
