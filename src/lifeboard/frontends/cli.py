"""Command-line interface for lifeboard."""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from ..config import LifeConfig, decode_glyph
from ..core.codec import load_board, save_board
from ..core.errors import CellOverlapError, FormatError, PrefabOutOfBoundsError
from ..core.game import GameOfLife
from ..core.prefabs import PrefabCatalog, Rotation

logger = logging.getLogger(__name__)


class CLILife:
    """Headless command-line runner for Game of Life boards."""

    def __init__(self, prefab_dir: Optional[str] = None) -> None:
        """Initialize CLI interface.

        Args:
            prefab_dir: Directory of saved prefabs to add to the built-ins
        """
        self.catalog = PrefabCatalog()
        if prefab_dir:
            self.catalog.load_directory(prefab_dir)

    def build_game(self, config: LifeConfig, load: Optional[str] = None) -> GameOfLife:
        """Create a game from a config, optionally starting from a saved board.

        Raises:
            OSError: If the saved board can't be read
            FormatError: If the saved board is malformed
        """
        board = load_board(load) if load else None
        rng = np.random.default_rng(config.seed)

        return GameOfLife(
            config.resolve_dims(),
            config.dead_glyph,
            config.alive_glyph,
            randomize=config.randomize,
            board=board,
            rng=rng,
        )

    def place_prefab(self, game: GameOfLife, name: str, at: Tuple[int, int], rotation: Rotation) -> Tuple[bool, str]:
        """Stamp a catalog prefab onto the game.

        Returns:
            Tuple of (success, status message)
        """
        prefab = self.catalog.get(name)
        if prefab is None:
            return False, f"Prefab '{name}' not found"

        game.home_cursor()
        if not game.move_cursor(*at):
            return False, f"Position {at} is outside the {game.dims[0]}x{game.dims[1]} board"

        try:
            game.place_prefab(prefab.board, rotation)
        except PrefabOutOfBoundsError as e:
            edges = []
            if e.x_overflow:
                edges.append("right")
            if e.y_overflow:
                edges.append("bottom")
            return False, f"Prefab '{name}' extends past the {' and '.join(edges)} edge"
        except CellOverlapError:
            return False, f"Prefab '{name}' overlaps living cells"

        return True, f"Placed '{name}' at {at} facing {rotation.value}"

    def run_simulation(
        self,
        game: GameOfLife,
        max_generations: int,
        show: bool = False,
        delay: float = 0.0,
    ) -> Tuple[int, str]:
        """Run a game until it dies or reaches the generation limit.

        Args:
            game: Game to run
            max_generations: Maximum generations to run
            show: Print every generation
            delay: Seconds to wait between generations when showing

        Returns:
            Tuple of (final_generation, finish_reason)
        """
        if not show:
            return game.run(max_generations)

        print(game)
        for _ in range(max_generations):
            if delay:
                time.sleep(delay)
            game.tick()
            if game.is_dead():
                return game.generation, "extinction"
            print(game)
            print(f"Generation {game.generation} | Population {game.population}")

        if game.population == 0:
            return game.generation, "extinction"
        return game.generation, "max_generations"

    def list_prefabs(self) -> None:
        """List available prefabs with their sizes."""
        print("Available prefabs:")
        for index, prefab in enumerate(self.catalog, start=1):
            width, height = prefab.size
            print(f"  [{index}] {prefab.name}: {width}x{height}, {prefab.population} cells")

    def export_prefab(self, name: str, directory: str) -> Optional[Path]:
        """Save a catalog prefab into a prefab directory.

        Returns:
            Path of the written file, or None if the prefab doesn't exist
        """
        prefab = self.catalog.get(name)
        if prefab is None:
            return None
        return self.catalog.save(prefab, directory)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run bounded Game of Life boards from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 30x20 board and show every generation
  lifeboard -W 30 -H 20 --random --show --delay 0.1

  # Stamp a glider facing down onto an empty board
  lifeboard --prefab Glider --at 2 2 --rotation down --show

  # Save the starting board, then replay it later
  lifeboard --random --seed 7 --save start.life
  lifeboard --load start.life --show

  # List prefabs, including ones saved in ./prefabs
  lifeboard --list-prefabs

Glyph aliases: _ => ' ', h => '#', a => '`', t => '@'
Use a width or height of 0 to fill the terminal.
        """,
    )

    # Board configuration
    parser.add_argument("-W", "--width", type=int, default=20, help="Board width, 0 to fit terminal (default: 20)")

    parser.add_argument("-H", "--height", type=int, default=20, help="Board height, 0 to fit terminal (default: 20)")

    parser.add_argument("--dead", default=".", help="Dead cell glyph (default: '.')")

    parser.add_argument("--alive", default="#", help="Alive cell glyph (default: '#')")

    parser.add_argument("-r", "--random", action="store_true", help="Randomize the starting board")

    parser.add_argument("--seed", type=int, help="Random seed for --random")

    # Persistence
    parser.add_argument("--load", metavar="FILE", help="Start from a saved board")

    parser.add_argument("--save", metavar="FILE", help="Save the starting board")

    # Prefabs
    parser.add_argument("--prefab", help="Name of a prefab to place before running")

    parser.add_argument(
        "--at",
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        default=[0, 0],
        help="Upper-left corner for --prefab (default: 0 0)",
    )

    parser.add_argument(
        "--rotation",
        default=Rotation.RIGHT.value,
        choices=[rotation.value for rotation in Rotation],
        help="Orientation for --prefab (default: right)",
    )

    parser.add_argument(
        "--prefab-dir",
        default="prefabs",
        help="Directory of saved prefabs (default: prefabs)",
    )

    parser.add_argument("--list-prefabs", action="store_true", help="List available prefabs and exit")

    parser.add_argument("--export-prefab", metavar="NAME", help="Save a prefab into --prefab-dir and exit")

    # Simulation
    parser.add_argument(
        "-g",
        "--max-generations",
        type=int,
        default=100,
        help="Maximum generations to run (default: 100)",
    )

    parser.add_argument("--show", action="store_true", help="Print every generation")

    parser.add_argument("--delay", type=float, default=0.0, help="Seconds between shown generations")

    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    return parser


def config_from_args(args: argparse.Namespace) -> LifeConfig:
    """Build a LifeConfig from parsed arguments.

    Raises:
        ValueError: If a glyph argument is invalid
    """
    return LifeConfig(
        width=args.width,
        height=args.height,
        dead_glyph=decode_glyph(args.dead),
        alive_glyph=decode_glyph(args.alive),
        randomize=args.random,
        save_name=args.save,
        prefab_dir=args.prefab_dir,
        tick_delay=args.delay,
        seed=args.seed,
    )


def validate_args(args: argparse.Namespace, config: LifeConfig) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        config: Config built from the arguments

    Returns:
        True if arguments are valid
    """
    errors = config.validate()

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.at[0] < 0 or args.at[1] < 0:
        errors.append("Prefab position must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_finish_reason(reason: str) -> str:
    """Human-readable description of why a run stopped."""
    if reason == "extinction":
        return "All cells died"
    if reason == "max_generations":
        return "Reached generation limit"
    return reason


def print_results(final_generation: int, reason: str, game: GameOfLife) -> None:
    """Print a one-line summary of a finished run."""
    print(
        f"{format_finish_reason(reason)} after {final_generation} generations, "
        f"population {game.population}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not validate_args(args, config):
        return 1

    cli = CLILife(config.prefab_dir)

    if args.list_prefabs:
        cli.list_prefabs()
        return 0

    if args.export_prefab:
        path = cli.export_prefab(args.export_prefab, config.prefab_dir)
        if path is None:
            print(f"Error: Prefab '{args.export_prefab}' not found")
            print(f"Available prefabs: {', '.join(cli.catalog.names())}")
            return 1
        print(f"Saved prefab to {path}")
        return 0

    try:
        game = cli.build_game(config, args.load)
    except (OSError, FormatError) as e:
        print(f"Error: Could not load board from {args.load}: {e}")
        return 1

    if args.prefab:
        placed, message = cli.place_prefab(game, args.prefab, tuple(args.at), Rotation(args.rotation))
        print(message)
        if not placed:
            return 1

    game.save_state()

    if config.save_name:
        try:
            save_board(config.save_name, game.board)
        except OSError as e:
            print(f"Error: Could not save board to {config.save_name}: {e}")
            return 1
        print(f"Saved starting board to {config.save_name}")

    logger.debug("Starting %dx%d board with population %d", game.dims[0], game.dims[1], game.population)
    final_generation, reason = cli.run_simulation(game, args.max_generations, args.show, config.tick_delay)
    print_results(final_generation, reason, game)

    return 0


if __name__ == "__main__":
    sys.exit(main())
