"""Basic tests for the lifeboard package."""

from lifeboard import Board, Cell, GameOfLife, PrefabCatalog, Rotation
from lifeboard.core import decode, encode


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = Board((10, 10))
    assert board.width == 10
    assert board.height == 10
    assert board[(0, 0)] is Cell.DEAD

    board[(5, 5)] = Cell.ALIVE
    assert board[(5, 5)] is Cell.ALIVE


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife((5, 5), ".", "#")
    assert game.population == 0

    game.set_cell((2, 2), Cell.ALIVE)
    assert game.population == 1


def test_prefab_catalog():
    """Test prefab catalog has the built-in prefabs."""
    catalog = PrefabCatalog()
    assert len(catalog) > 0
    assert "Glider" in catalog.names()


def test_place_and_save():
    """Test placing a prefab and round-tripping the board."""
    game = GameOfLife((12, 12))
    game.move_cursor(2, 2)
    game.place_prefab(PrefabCatalog().get("R-pentomino").board, Rotation.UP)
    assert game.population == 5

    restored = decode(encode(game.board))
    assert restored == game.board


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    game = GameOfLife((5, 5))

    # Create blinker pattern (vertical line)
    game.set_cell((2, 1), Cell.ALIVE)
    game.set_cell((2, 2), Cell.ALIVE)
    game.set_cell((2, 3), Cell.ALIVE)

    initial_population = game.population
    assert initial_population == 3

    # Step once - should become horizontal
    game.tick()
    assert game.population == 3
    assert game.board[(1, 2)] is Cell.ALIVE
    assert game.board[(2, 2)] is Cell.ALIVE
    assert game.board[(3, 2)] is Cell.ALIVE

    # Step again - should return to vertical
    game.tick()
    assert game.population == 3
    assert game.board[(2, 1)] is Cell.ALIVE
    assert game.board[(2, 2)] is Cell.ALIVE
    assert game.board[(2, 3)] is Cell.ALIVE
