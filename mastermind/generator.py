"""
Secret code generation with a clear fallback.

With duplicates allowed every position is an independent pick from the
palette. Without duplicates we draw distinct colors. If the code is longer
than the palette, distinct colors are impossible, so we fall back to the
duplicates-allowed draw instead of failing (callers must not assume
uniqueness in that case).
"""

import logging
import random
from typing import Iterable, Optional, Union

from .errors import InvalidConfiguration
from .palette import PaletteColor
from .types import Code, ColorKey

logger = logging.getLogger(__name__)

# OS entropy; no shared seeded state to worry about between calls
_system_random = random.SystemRandom()


def _keys(palette: Iterable[Union[PaletteColor, ColorKey]]) -> Code:
    keys = []
    for entry in palette:
        keys.append(entry.key if isinstance(entry, PaletteColor) else entry)
    return tuple(keys)


def generate_code(
    palette: Iterable[Union[PaletteColor, ColorKey]],
    length: int,
    allow_duplicates: bool,
    rng: Optional[random.Random] = None,
) -> Code:
    keys = _keys(palette)
    if not keys:
        raise InvalidConfiguration("Cannot generate a code from an empty palette.")
    if length <= 0:
        raise InvalidConfiguration(f"Code length must be positive, got {length}.")

    rng = rng or _system_random

    if not allow_duplicates and length > len(keys):
        logger.warning(
            "Cannot pick %d distinct colors from %d; falling back to duplicates",
            length,
            len(keys),
        )
        allow_duplicates = True

    if allow_duplicates:
        return tuple(rng.choice(keys) for _ in range(length))

    # sample() is a uniform draw without replacement
    return tuple(rng.sample(keys, length))
