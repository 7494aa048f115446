"""
Game configuration: code length, attempt budget, duplicate policy, palette.

A configuration is fixed for one game. Changing any of it means starting
a new game with a new GameConfiguration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from .errors import InvalidConfiguration
from .palette import PaletteColor, coerce_color, palette_keys
from .types import Code, ColorKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfiguration:
    length: int
    max_attempts: int
    allow_duplicates: bool
    palette: Tuple[PaletteColor, ...]

    @property
    def keys(self) -> Code:
        return palette_keys(self.palette)

    @property
    def unique_secret(self) -> bool:
        # Only then is the secret guaranteed to have no repeated color
        return not self.allow_duplicates and self.length <= len(self.palette)

    def color(self, key: ColorKey) -> Optional[PaletteColor]:
        for entry in self.palette:
            if entry.key == key:
                return entry
        return None


def _positive_int(name: str, value: Any) -> int:
    # bool is an int subclass; True must not sneak in as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidConfiguration(f"{name} must be positive, got {value}.")
    return value


def configure(
    length: int,
    max_attempts: int,
    allow_duplicates: bool,
    palette: Iterable[Any],
) -> GameConfiguration:
    """
    Validate inputs and build a GameConfiguration.

    Raises InvalidConfiguration for:
      - non-positive (or non-integer) length / max_attempts
      - allow_duplicates that is not a bool
      - empty palette, duplicate keys, malformed entries

    length > palette size with allow_duplicates=False is accepted: the
    generator falls back to drawing with replacement.
    """
    length = _positive_int("length", length)
    max_attempts = _positive_int("max_attempts", max_attempts)

    if not isinstance(allow_duplicates, bool):
        raise InvalidConfiguration(f"allow_duplicates must be a bool, got {allow_duplicates!r}.")

    if palette is None:
        raise InvalidConfiguration("palette is required.")
    # a bare string would be split into one-character keys
    if isinstance(palette, str):
        raise InvalidConfiguration("palette must be a list of colors, not a string.")
    colors = tuple(coerce_color(entry) for entry in palette)
    if not colors:
        raise InvalidConfiguration("palette must contain at least one color.")

    seen = set()
    for color in colors:
        if color.key in seen:
            raise InvalidConfiguration(f"Duplicate palette key {color.key!r}.")
        seen.add(color.key)

    if not allow_duplicates and length > len(colors):
        logger.warning(
            "length %d exceeds palette size %d; secrets for this configuration may repeat colors",
            length,
            len(colors),
        )

    return GameConfiguration(
        length=length,
        max_attempts=max_attempts,
        allow_duplicates=allow_duplicates,
        palette=colors,
    )
