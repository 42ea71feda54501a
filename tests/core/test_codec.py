"""Tests for board encoding and decoding."""

import struct

import numpy as np
import pytest
from lifeboard.core.board import Board, Cell
from lifeboard.core.codec import HEADER, decode, encode, load_board, packed_length, save_board
from lifeboard.core.errors import FormatError


class TestEncode:
    """Test cases for encode()."""

    def test_header(self):
        """Test that dims are written as little-endian u64."""
        data = encode(Board((3, 2)))

        assert data[:16] == struct.pack("<QQ", 3, 2)
        assert len(data) == 16 + 1

    def test_bit_order(self):
        """Test LSB-first packing in linear order."""
        # linear offsets 0, 2 and 9 on a 5x2 board
        board = Board.from_cells(5, 2, [(0, 0), (2, 0), (4, 1)])
        data = encode(board)

        assert data[16:] == bytes([0b00000101, 0b00000010])

    def test_padding_is_zero(self):
        """Test that unused high bits of the last byte are cleared."""
        board = Board((3, 3), fill=Cell.ALIVE)
        data = encode(board)

        assert len(data) == 16 + 2
        assert data[16] == 0xFF
        assert data[17] == 0b00000001

    def test_exact_byte_multiple(self):
        data = encode(Board((4, 2), fill=Cell.ALIVE))
        assert data[16:] == b"\xff"

    def test_packed_length(self):
        assert packed_length(0, 5) == 0
        assert packed_length(1, 1) == 1
        assert packed_length(4, 2) == 1
        assert packed_length(3, 3) == 2


class TestDecode:
    """Test cases for decode()."""

    def test_round_trip(self):
        """Test that decoding restores dims and every cell."""
        for seed, dims in enumerate([(1, 1), (3, 5), (8, 8), (13, 7)]):
            board = Board.random(*dims, rng=np.random.default_rng(seed))
            decoded = decode(encode(board))

            assert decoded.dims == board.dims
            assert decoded == board

    def test_decoded_cells(self):
        data = struct.pack("<QQ", 3, 1) + bytes([0b00000110])
        board = decode(data)

        assert board[(0, 0)] is Cell.DEAD
        assert board[(1, 0)] is Cell.ALIVE
        assert board[(2, 0)] is Cell.ALIVE

    def test_padding_bits_ignored(self):
        """Test that set bits past the cell count don't matter."""
        data = struct.pack("<QQ", 2, 1) + bytes([0b11111101])
        board = decode(data)

        assert board.population == 1
        assert board[(0, 0)] is Cell.ALIVE

    def test_trailing_bytes_ignored(self):
        board = Board.from_cells(2, 2, [(1, 1)])
        assert decode(encode(board) + b"extra") == board

    def test_accepts_bytearray(self):
        board = Board.from_cells(2, 2, [(0, 1)])
        assert decode(bytearray(encode(board))) == board

    def test_empty_board(self):
        board = decode(struct.pack("<QQ", 0, 4))
        assert board.dims == (0, 4)

    @pytest.mark.parametrize("data", [b"", b"\x01" * 8, b"\x00" * (HEADER.size - 1)])
    def test_short_header(self, data):
        with pytest.raises(FormatError):
            decode(data)

    def test_truncated_cells(self):
        """Test that missing packed bytes are an error."""
        data = struct.pack("<QQ", 4, 4) + b"\xff"
        with pytest.raises(FormatError):
            decode(data)

    @pytest.mark.parametrize("width, height", [(0, 2**64 - 1), (2**63, 0)])
    def test_oversized_empty_board(self, width, height):
        """Test that a zero-area header with an unindexable side is rejected."""
        with pytest.raises(FormatError):
            decode(struct.pack("<QQ", width, height))

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode(b"short")


class TestFiles:
    """Test cases for file persistence."""

    def test_save_and_load(self, tmp_path):
        board = Board.from_cells(6, 4, [(0, 0), (5, 3), (2, 1)])
        path = tmp_path / "board.life"

        save_board(path, board)

        assert path.read_bytes() == encode(board)
        assert load_board(path) == board

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_board(tmp_path / "missing.life")

    def test_load_malformed_file(self, tmp_path):
        path = tmp_path / "bad.life"
        path.write_bytes(b"nope")

        with pytest.raises(FormatError):
            load_board(str(path))
