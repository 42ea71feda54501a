#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import GameOfLife, PrefabCatalog, Rotation
from lifeboard.core import decode, encode


def main():
    """Demonstrate programmatic usage of the lifeboard package."""
    # Create a game with an empty 20x20 board
    game = GameOfLife((20, 20), ".", "#")

    # Stamp a glider facing down near the top-left corner
    catalog = PrefabCatalog()
    glider = catalog.get("Glider")

    if glider:
        game.move_cursor(8, 2)
        game.place_prefab(glider.board, Rotation.DOWN)
        game.save_state()

        print("Initial state:")
        print(game)
        print(f"Population: {game.population}")
        print()

        # Run simulation for 10 generations
        for _ in range(10):
            game.tick()
            print(f"Generation {game.generation}:")
            print(game)
            print(f"Population: {game.population}")

            if game.is_dead():
                print("All cells died!")
                break

            print()

    # Save the board and read it back
    data = encode(game.board)
    print(f"Encoded board: {len(data)} bytes")
    print(f"Round trip matches: {decode(data) == game.board}")

    # Back to the start position
    game.reset()
    print(f"Population after reset: {game.population}")


if __name__ == "__main__":
    main()
