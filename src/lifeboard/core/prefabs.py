"""Prefab patterns, their rotations, and the prefab catalog."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union
import logging

from .board import Board, Pos
from .codec import FILE_SUFFIX, load_board, save_board
from .errors import FormatError

logger = logging.getLogger(__name__)


class Rotation(Enum):
    """Orientation of a prefab when stamped onto a board.

    ``RIGHT`` is the identity: every prefab is stored facing right.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UP_FLIPPED = "up-flipped"
    DOWN_FLIPPED = "down-flipped"
    LEFT_FLIPPED = "left-flipped"
    RIGHT_FLIPPED = "right-flipped"

    @property
    def is_vertical(self) -> bool:
        """Whether this rotation swaps the prefab's width and height."""
        return self in _VERTICAL

    def next(self) -> "Rotation":
        """The following rotation in cycling order."""
        index = _CYCLE.index(self)
        return _CYCLE[(index + 1) % len(_CYCLE)]

    @classmethod
    def parse(cls, name: str) -> "Rotation":
        """Look up a rotation by name, ignoring case and ``_``/``-``.

        Raises:
            ValueError: If the name doesn't match a rotation
        """
        return cls(name.strip().lower().replace("_", "-"))


_VERTICAL = frozenset({Rotation.UP, Rotation.DOWN, Rotation.UP_FLIPPED, Rotation.DOWN_FLIPPED})
_CYCLE = (
    Rotation.RIGHT,
    Rotation.DOWN,
    Rotation.LEFT,
    Rotation.UP,
    Rotation.RIGHT_FLIPPED,
    Rotation.DOWN_FLIPPED,
    Rotation.LEFT_FLIPPED,
    Rotation.UP_FLIPPED,
)


def transform_point(x: int, y: int, width: int, height: int, rotation: Rotation) -> Pos:
    """Map a source coordinate of a ``width`` x ``height`` prefab to its rotated position."""
    if rotation is Rotation.RIGHT:
        return Pos(x, y)
    if rotation is Rotation.UP:
        return Pos(y, width - 1 - x)
    if rotation is Rotation.DOWN:
        return Pos(height - 1 - y, x)
    if rotation is Rotation.LEFT:
        return Pos(width - 1 - x, height - 1 - y)
    if rotation is Rotation.RIGHT_FLIPPED:
        return Pos(x, height - 1 - y)
    if rotation is Rotation.UP_FLIPPED:
        return Pos(height - 1 - y, width - 1 - x)
    if rotation is Rotation.DOWN_FLIPPED:
        return Pos(y, x)
    if rotation is Rotation.LEFT_FLIPPED:
        return Pos(width - 1 - x, y)
    raise ValueError(f"Unknown rotation {rotation!r}")


def rotated_size(width: int, height: int, rotation: Rotation) -> Tuple[int, int]:
    """Bounding box (width, height) of a prefab after rotation."""
    if rotation.is_vertical:
        return (height, width)
    return (width, height)


def rotate_cells(board: Board, rotation: Rotation) -> List[Pos]:
    """Rotated coordinates of every living cell of ``board``.

    Dead cells produce no output, so stamping the result is additive only.
    """
    return [transform_point(x, y, board.width, board.height, rotation) for x, y in board.alive_cells()]


def rotate_board(board: Board, rotation: Rotation) -> Board:
    """Materialize a rotated copy of ``board``."""
    width, height = rotated_size(board.width, board.height, rotation)
    return Board.from_cells(width, height, rotate_cells(board, rotation))


@dataclass(frozen=True, eq=False)
class Prefab:
    """A named, read-only pattern that can be stamped onto a board."""

    name: str
    board: Board

    @classmethod
    def from_cells(cls, name: str, width: int, height: int, cells: Sequence[Tuple[int, int]]) -> "Prefab":
        """Create a prefab from the coordinates of its living cells."""
        return cls(name, Board.from_cells(width, height, cells))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.board.width, self.board.height)

    @property
    def population(self) -> int:
        return self.board.population


def builtin_prefabs() -> List[Prefab]:
    """The prefabs shipped with the package, all facing right."""
    return [
        Prefab.from_cells("R-pentomino", 3, 3, [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)]),
        Prefab.from_cells("Glider", 3, 3, [(2, 0), (0, 1), (1, 1), (1, 2), (2, 2)]),
        Prefab.from_cells(
            "Lightweight Spaceship",
            5,
            4,
            [(1, 0), (4, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 3), (3, 3), (4, 2)],
        ),
        Prefab.from_cells(
            "T22",
            12,
            8,
            [
                (4, 0), (5, 0), (8, 0),
                (4, 1), (5, 1), (7, 1), (10, 1),
                (0, 2), (5, 2), (10, 2),
                (1, 3), (6, 3), (9, 3), (11, 3),
                (1, 4), (6, 4), (9, 4), (11, 4),
                (0, 5), (5, 5), (10, 5),
                (4, 6), (5, 6), (7, 6), (10, 6),
                (4, 7), (5, 7), (8, 7),
            ],
        ),
    ]


class PrefabCatalog:
    """Ordered collection of prefabs, addressable by position or name."""

    def __init__(self, prefabs: Optional[Iterable[Prefab]] = None, include_builtin: bool = True) -> None:
        """Initialize the catalog.

        Args:
            prefabs: Extra prefabs appended after the built-ins
            include_builtin: Whether to start with the built-in prefabs
        """
        self._prefabs: List[Prefab] = []
        self._by_name: Dict[str, Prefab] = {}

        if include_builtin:
            for prefab in builtin_prefabs():
                self.add(prefab)

        for prefab in prefabs or []:
            self.add(prefab)

    def add(self, prefab: Prefab) -> int:
        """Append a prefab and return its index.

        A later prefab with an existing name shadows the earlier one for
        lookups by name; both stay addressable by index.
        """
        self._prefabs.append(prefab)
        self._by_name[prefab.name] = prefab
        return len(self._prefabs) - 1

    def get(self, name: str) -> Optional[Prefab]:
        """Get a prefab by name, or None if not found."""
        return self._by_name.get(name)

    def names(self) -> List[str]:
        """Names of all prefabs in catalog order."""
        return [prefab.name for prefab in self._prefabs]

    def load_directory(self, directory: Union[str, Path], suffix: str = FILE_SUFFIX) -> int:
        """Load every encoded board in ``directory`` as a prefab.

        Files are read in name order and named after their file name with
        ``suffix`` stripped and underscores read back as spaces, undoing
        ``save``. Files that can't be read or decoded are skipped.

        Returns:
            Number of prefabs added
        """
        path = Path(directory)
        if not path.is_dir():
            logger.debug("Prefab directory %s not found", path)
            return 0

        loaded = 0
        for filepath in sorted(path.glob(f"*{suffix}")):
            try:
                board = load_board(filepath)
            except (FormatError, OSError) as e:
                logger.warning("Skipping prefab %s: %s", filepath.name, e)
                continue

            name = filepath.name[: len(filepath.name) - len(suffix)]
            self.add(Prefab(name.replace("_", " "), board))
            loaded += 1

        logger.debug("Loaded %d prefabs from %s", loaded, path)
        return loaded

    def save(self, prefab: Prefab, directory: Union[str, Path], suffix: str = FILE_SUFFIX) -> Path:
        """Write a prefab into ``directory`` so ``load_directory`` finds it.

        Spaces in the name become underscores in the file name.

        Returns:
            Path of the written file
        """
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)

        filepath = path / f"{prefab.name.replace(' ', '_')}{suffix}"
        save_board(filepath, prefab.board)
        return filepath

    def __len__(self) -> int:
        return len(self._prefabs)

    def __getitem__(self, index: int) -> Prefab:
        return self._prefabs[index]

    def __iter__(self) -> Iterator[Prefab]:
        return iter(self._prefabs)
