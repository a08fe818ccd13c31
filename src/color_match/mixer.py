# mixer.py – quantity-weighted palette mixing
#
# A PickedColor maps a canonical "#rrggbb" key to how many units of that
# swatch are in the mix. Mappings are never mutated: every update returns a
# fresh dict derived from the caller's one.

from __future__ import annotations

import logging
from typing import Dict, Mapping

from .colorspace import Color, Hex, hex_to_rgb, rgb_to_hex, round_channel
from .palette import WHITE

log = logging.getLogger(__name__)

PickedColor = Mapping[Hex, int]


def quantity(picked: PickedColor, color: Color) -> int:
    """Units of ``color`` in the mix; absent and zero are the same thing."""
    return picked.get(rgb_to_hex(color), 0)


def add_picked_color(
    existing: PickedColor, color: Color, amount: int = 1
) -> Dict[Hex, int]:
    clone = dict(existing)
    key = rgb_to_hex(color)
    clone[key] = existing.get(key, 0) + amount
    return clone


def remove_picked_color(existing: PickedColor, color: Color) -> Dict[Hex, int]:
    """Take one unit of ``color`` out of the mix, never going below zero."""
    clone = dict(existing)
    key = rgb_to_hex(color)
    clone[key] = max(0, existing.get(key, 0) - 1)
    return clone


def calculate_color(picked: PickedColor) -> Color:
    """
    Weighted centroid of the picked colors, each channel rounded half up.

    An empty mix (total quantity 0) is white, like an unpainted canvas.
    """
    n = sum(picked.values())
    if n == 0:
        return WHITE

    # plain int sums are exact at any size, so iteration order is irrelevant
    weighted = [(q, hex_to_rgb(key)) for key, q in picked.items() if q]
    totals = (
        sum(q * int(c.r) for q, c in weighted),
        sum(q * int(c.g) for q, c in weighted),
        sum(q * int(c.b) for q, c in weighted),
    )
    r, g, b = (round_channel(t / n) for t in totals)
    log.debug("mixed %d units of %d colors → (%d, %d, %d)", n, len(weighted), r, g, b)
    return Color(r, g, b)


__all__ = [
    "PickedColor",
    "quantity",
    "add_picked_color",
    "remove_picked_color",
    "calculate_color",
]
