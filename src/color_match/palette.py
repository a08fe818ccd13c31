from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from .colorspace import Color, hex_to_rgb


@dataclass(frozen=True)
class PaletteEntry:
    color: Color
    name: str  # display label only


Palette = Sequence[PaletteEntry]


def _entry(hex_str: str, name: str) -> PaletteEntry:
    return PaletteEntry(hex_to_rgb(hex_str), name)


KNOWN_COLORS: Mapping[str, PaletteEntry] = {
    "yellow": _entry("#FFED00", "yellow"),
    "red": _entry("#FF0000", "red"),
    "magenta": _entry("#FF00AB", "magenta"),
    "blue": _entry("#0047ab", "blue"),
    "cyan": _entry("#00EDFF", "cyan"),
    "green": _entry("#00B500", "green"),
    "white": _entry("#FFFFFF", "white"),
    "black": _entry("#000000", "black"),
}

# display order
BASIC_PALETTE: Palette = tuple(
    KNOWN_COLORS[name]
    for name in ("yellow", "red", "magenta", "blue", "cyan", "green", "white", "black")
)

WHITE = KNOWN_COLORS["white"].color


__all__ = ["PaletteEntry", "Palette", "KNOWN_COLORS", "BASIC_PALETTE", "WHITE"]
