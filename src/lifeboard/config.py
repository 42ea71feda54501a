"""Run configuration for lifeboard frontends."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import shutil

# Stand-ins for glyphs that are awkward to pass as command-line arguments
GLYPH_ALIASES = {
    "_": " ",
    "h": "#",
    "a": "`",
    "t": "@",
}

# Columns and rows taken by the board border, plus one status line
_BORDER_COLUMNS = 3
_BORDER_ROWS = 3


def decode_glyph(value: str) -> str:
    """Translate a glyph argument, expanding aliases.

    Raises:
        ValueError: If the value is not a single character
    """
    if len(value) != 1:
        raise ValueError(f"Glyph must be a single character, got {value!r}")
    return GLYPH_ALIASES.get(value, value)


def fit_terminal(columns: int, lines: int) -> Tuple[int, int]:
    """Largest board (width, height) whose bordered rendering fits a terminal.

    Each cell is drawn two characters wide.
    """
    width = max(1, (columns - _BORDER_COLUMNS) // 2)
    height = max(1, lines - _BORDER_ROWS)
    return (width, height)


@dataclass
class LifeConfig:
    """Settings for one interactive or headless session.

    A width or height of 0 means "as large as the terminal allows".
    """

    width: int = 20
    height: int = 20
    dead_glyph: str = " "
    alive_glyph: str = "#"
    randomize: bool = False
    save_name: Optional[str] = None
    prefab_dir: str = "prefabs"
    tick_delay: float = 0.1
    seed: Optional[int] = None

    def resolve_dims(self, terminal_size: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
        """Board dimensions with 0 replaced by the terminal-filling size.

        Args:
            terminal_size: (columns, lines); queried from the terminal if omitted
        """
        if self.width and self.height:
            return (self.width, self.height)

        if terminal_size is None:
            size = shutil.get_terminal_size()
            terminal_size = (size.columns, size.lines)

        fit_width, fit_height = fit_terminal(*terminal_size)
        return (self.width or fit_width, self.height or fit_height)

    def validate(self) -> List[str]:
        """Check the settings.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.width < 0:
            errors.append("Width must not be negative")

        if self.height < 0:
            errors.append("Height must not be negative")

        if len(self.dead_glyph) != 1 or len(self.alive_glyph) != 1:
            errors.append("Glyphs must be single characters")
        elif self.dead_glyph == self.alive_glyph:
            errors.append("Dead and alive glyphs must differ")

        if self.tick_delay < 0:
            errors.append("Tick delay must not be negative")

        return errors
