"""Conway's Game of Life simulation engine."""

from typing import Optional, Sequence, Tuple
import logging
import numpy as np

from .board import Board, Cell, Pos
from .errors import CellOutOfRangeError, CellOverlapError, PrefabOutOfBoundsError
from .prefabs import Rotation, rotate_cells, rotated_size

logger = logging.getLogger(__name__)


class GameOfLife:
    """Conway's Game of Life on a bounded board.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The engine owns the live board, a snapshot used to reset to the start
    position, and an editing cursor that always stays on the board. Once a
    tick finds no living cells the game is dead and further ticks do
    nothing until ``reset()``.
    """

    def __init__(
        self,
        dims: Sequence[int],
        dead_glyph: str = " ",
        alive_glyph: str = "#",
        randomize: bool = False,
        board: Optional[Board] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """Initialize the game.

        Args:
            dims: (width, height) of a fresh board; ignored if ``board`` is given
            dead_glyph: Character drawn for dead cells
            alive_glyph: Character drawn for living cells
            randomize: Make each cell of a fresh board alive with probability 1/2
            board: Initial board, used as-is
            rng: Random source for ``randomize``
        """
        if board is None:
            width, height = dims
            board = Board.random(width, height, rng) if randomize else Board.blank(width, height)

        self._board = board
        self._initial_state = Board(board.dims)
        self._cursor = Pos(0, 0)
        self._dead = False
        self._generation = 0
        self.dead_glyph = dead_glyph
        self.alive_glyph = alive_glyph

    @property
    def board(self) -> Board:
        """The live board."""
        return self._board

    @property
    def initial_state(self) -> Board:
        """The snapshot written by ``save_state()``."""
        return self._initial_state

    @property
    def dims(self) -> Tuple[int, int]:
        """Board dimensions as (width, height)."""
        return (self._board.width, self._board.height)

    @property
    def cursor(self) -> Pos:
        return self._cursor

    @property
    def generation(self) -> int:
        """Number of ticks that advanced the board since the last reset."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    def is_dead(self) -> bool:
        """Whether a tick has found the board empty."""
        return self._dead

    def save_state(self) -> None:
        """Snapshot the live board so ``reset()`` can return to it."""
        self._initial_state.copy_from(self._board)

    def load_initial(self) -> None:
        """Overwrite the live board with the snapshot."""
        self._board.copy_from(self._initial_state)

    # older spelling
    load_inital = load_initial

    def reset(self) -> None:
        """Restore the snapshot and bring the game back to life.

        The cursor is left where it is.
        """
        self.load_initial()
        self._dead = False
        self._generation = 0
        logger.debug("Game reset to snapshot (population %d)", self.population)

    def clear(self) -> None:
        """Kill every cell of the live board and restart the generation count."""
        self._board.values.fill(0)
        self._dead = False
        self._generation = 0

    def move_cursor(self, dx: int, dy: int) -> bool:
        """Move the cursor by an offset.

        Returns:
            False (and leaves the cursor alone) if the move would leave the board
        """
        x, y = self._cursor.x + dx, self._cursor.y + dy
        if not self._board.in_bounds(x, y):
            return False

        self._cursor = Pos(x, y)
        return True

    def home_cursor(self) -> None:
        """Move the cursor to the upper-left cell."""
        self._cursor = Pos(0, 0)

    def set_cell(self, pos: Tuple[int, int], cell: Cell) -> Cell:
        """Set the state of a cell.

        Returns:
            The state written

        Raises:
            CellOutOfRangeError: If ``pos`` is outside the board
        """
        x, y = pos
        if not self._board.in_bounds(x, y):
            raise CellOutOfRangeError((x, y), self.dims)

        self._board.set((x, y), cell)
        return Cell(cell)

    def toggle_cell(self, pos: Tuple[int, int]) -> Cell:
        """Flip the state of a cell.

        Returns:
            New state of the cell

        Raises:
            CellOutOfRangeError: If ``pos`` is outside the board
        """
        x, y = pos
        current = self._board.get((x, y)) if self._board.in_bounds(x, y) else Cell.DEAD
        return self.set_cell(pos, current.toggled())

    def fill_rect(self, upper_left: Tuple[int, int], lower_right: Tuple[int, int], cell: Cell) -> bool:
        """Set every cell in the half-open rectangle ``[ul, lr)``.

        ``upper_left`` must be a cell of the board; ``lower_right`` is
        exclusive and may sit on the far edge.

        Returns:
            False (with no change) if the rectangle is empty or out of bounds
        """
        left, top = upper_left
        right, bottom = lower_right

        if not self._board.in_bounds(left, top):
            return False
        if right > self._board.width or bottom > self._board.height:
            return False
        if right <= left or bottom <= top:
            return False

        self._board.values[left:right, top:bottom] = int(cell)
        return True

    def tick(self) -> None:
        """Advance the simulation by one generation."""
        if self._dead:
            return

        if self._board.population == 0:
            self._dead = True
            logger.debug("Board died at generation %d", self._generation)
            return

        # Count neighbors for all cells efficiently
        neighbor_counts = self._board.neighbor_counts()
        alive = self._board.values > 0

        # Birth on exactly 3, survival on 2 or 3
        next_alive = (neighbor_counts == 3) | (alive & (neighbor_counts == 2))

        self._board = Board.from_array(next_alive.astype(np.int8))
        self._generation += 1

    def run(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Tick until the board dies or the generation limit is reached.

        Returns:
            Tuple of (final_generation, reason) where reason is
            'extinction' or 'max_generations'
        """
        for _ in range(max_generations):
            self.tick()
            if self._dead:
                return self._generation, "extinction"

        # A board that emptied on the last tick is only noticed by the next one
        if self._board.population == 0:
            return self._generation, "extinction"

        return self._generation, "max_generations"

    def place_prefab(self, prefab: Board, rotation: Rotation = Rotation.RIGHT) -> None:
        """Stamp a prefab onto the board with its upper-left corner at the cursor.

        Only the prefab's living cells are written. Nothing changes if the
        placement fails.

        Raises:
            PrefabOutOfBoundsError: If the rotated prefab extends past the board
            CellOverlapError: If any cell under the prefab's footprint is alive
        """
        width, height = rotated_size(prefab.width, prefab.height, rotation)
        x, y = self._cursor

        x_overflow = x + width > self._board.width
        y_overflow = y + height > self._board.height
        if x_overflow or y_overflow:
            raise PrefabOutOfBoundsError(x_overflow, y_overflow)

        if np.any(self._board.values[x : x + width, y : y + height]):
            raise CellOverlapError()

        for px, py in rotate_cells(prefab, rotation):
            self.set_cell((x + px, y + py), Cell.ALIVE)

    def __str__(self) -> str:
        """Render the board inside a border using the game's glyphs."""
        width, height = self.dims
        cells = self._board.values
        lines = [" -" * (width + 1)]
        for y in range(height):
            row = "".join(f" {self.alive_glyph if cells[x, y] else self.dead_glyph}" for x in range(width))
            lines.append(f"|{row} |")
        lines.append(" -" * (width + 1))
        return "\n".join(lines)
