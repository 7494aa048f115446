"""
Palette entries.

The core only ever looks at `key`. `label` and `hex` ride along so the UI
can draw swatches; nothing here interprets them.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

from .errors import InvalidConfiguration
from .types import Code


@dataclass(frozen=True)
class PaletteColor:
    key: str
    label: str
    hex: Optional[str] = None


DEFAULT_PALETTE: Tuple[PaletteColor, ...] = (
    PaletteColor("r", "Red", "#ef4444"),
    PaletteColor("b", "Blue", "#3b82f6"),
    PaletteColor("g", "Green", "#22c55e"),
    PaletteColor("y", "Yellow", "#eab308"),
    PaletteColor("o", "Orange", "#f97316"),
    PaletteColor("p", "Purple", "#a855f7"),
)

# Optional extra colors the UI can switch on
EXTRA_COLORS: Tuple[PaletteColor, ...] = (
    PaletteColor("c", "Cyan", "#06b6d4"),
    PaletteColor("m", "Magenta", "#db2777"),
)


def coerce_color(entry: Any) -> PaletteColor:
    """
    Accepts:
      PaletteColor("r", "Red", "#ef4444")
      {"key": "r", "label": "Red", "hex": "#ef4444"}   ("k" works too)
      "r"   -> label "R", no hex
    """
    if isinstance(entry, PaletteColor):
        color = entry
    elif isinstance(entry, str):
        color = PaletteColor(key=entry, label=entry.upper())
    elif isinstance(entry, Mapping):
        key = entry.get("key", entry.get("k"))
        if not isinstance(key, str):
            raise InvalidConfiguration(f"Palette entry {dict(entry)!r} has no string key.")
        color = PaletteColor(
            key=key,
            label=str(entry.get("label") or key.upper()),
            hex=entry.get("hex"),
        )
    else:
        raise InvalidConfiguration(f"Unsupported palette entry: {entry!r}")

    if color.key == "":
        raise InvalidConfiguration("Palette keys must be non-empty.")
    return color


def palette_keys(palette: Iterable[PaletteColor]) -> Code:
    return tuple(color.key for color in palette)


def extend_palette(
    palette: Iterable[PaletteColor], extra: Iterable[PaletteColor] = EXTRA_COLORS
) -> Tuple[PaletteColor, ...]:
    """Append the extra colors whose keys are not in the palette yet (order kept)."""
    merged = list(palette)
    existing = set(palette_keys(merged))
    for color in extra:
        if color.key not in existing:
            merged.append(color)
            existing.add(color.key)
    return tuple(merged)
