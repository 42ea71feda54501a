"""Binary encoding of boards for save files and the prefab library.

Layout::

    [ width  : u64 little-endian ]
    [ height : u64 little-endian ]
    [ cell bits: one bit per cell in linear order (x fastest), packed
      least-significant bit first, final byte zero-padded ]

There is no version tag. Files written in the older byte-per-cell layout
decode as garbage or fail the length check.
"""

from pathlib import Path
from typing import Tuple, Union
import logging
import struct
import numpy as np

from .board import Board
from .errors import FormatError

logger = logging.getLogger(__name__)

HEADER = struct.Struct("<QQ")
FILE_SUFFIX = ".life"


def packed_length(width: int, height: int) -> int:
    """Number of bytes needed for the cell bits of a board."""
    return (width * height + 7) // 8


def encode(board: Board) -> bytes:
    """Encode a board to bytes."""
    bits = board.raw_data() != 0
    packed = np.packbits(bits, bitorder="little")
    return HEADER.pack(board.width, board.height) + packed.tobytes()


def decode(data: Union[bytes, bytearray, memoryview]) -> Board:
    """Decode a board from bytes.

    Padding bits and any bytes past the packed cell data are ignored.

    Raises:
        FormatError: If the data is shorter than the header or than the
            header plus the packed cell data, or declares
            dimensions too large to allocate
    """
    data = bytes(data)
    width, height = read_header(data)

    count = width * height
    end = HEADER.size + packed_length(width, height)
    if len(data) < end:
        raise FormatError(
            f"Truncated board data: {width}x{height} needs {end} bytes, got {len(data)}"
        )

    try:
        if count == 0:
            return Board((width, height))

        packed = np.frombuffer(data[HEADER.size:end], dtype=np.uint8)
        bits = np.unpackbits(packed, count=count, bitorder="little")
        return Board.from_data((width, height), bits)
    except (ValueError, OverflowError) as e:
        # numpy rejects dimensions it can't index, even on zero-area boards
        raise FormatError(f"Unsupported board size {width}x{height}: {e}") from e


def read_header(data: bytes) -> Tuple[int, int]:
    """Read (width, height) from the start of encoded data.

    Raises:
        FormatError: If the data is shorter than the header
    """
    if len(data) < HEADER.size:
        raise FormatError(f"Board data too short for header: {len(data)} < {HEADER.size} bytes")
    return HEADER.unpack_from(data)


def save_board(path: Union[str, Path], board: Board) -> None:
    """Write an encoded board to a file."""
    Path(path).write_bytes(encode(board))
    logger.debug("Saved %dx%d board to %s", board.width, board.height, path)


def load_board(path: Union[str, Path]) -> Board:
    """Read and decode a board from a file.

    Raises:
        OSError: If the file can't be read
        FormatError: If the file contents are malformed
    """
    board = decode(Path(path).read_bytes())
    logger.debug("Loaded %dx%d board from %s", board.width, board.height, path)
    return board
