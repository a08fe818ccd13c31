from __future__ import annotations

import logging
from dataclasses import dataclass

from .colorspace import Color, rgb2lab, round_channel
from .distance import delta_e
from .mixer import PickedColor, calculate_color

log = logging.getLogger(__name__)

# delta_e is not normalised and overshoots 100 for far-apart colors;
# anything above is reported as 100.
MAX_DIFFERENCE = 100.0
MATCH_TOLERANCE = 1.0


@dataclass(frozen=True)
class MatchResult:
    mixed: Color
    difference: float
    is_match: bool


def evaluate_match(picked: PickedColor, target: Color) -> MatchResult:
    """Mix ``picked`` and measure how far the result is from ``target``."""
    mixed = calculate_color(picked)
    difference = delta_e(rgb2lab(mixed), rgb2lab(target))
    displayed = min(difference, MAX_DIFFERENCE)
    is_match = displayed <= MATCH_TOLERANCE
    log.debug(
        "mix=%s target=%s ΔE=%.4f (shown %.2f) match=%s",
        mixed,
        target,
        difference,
        displayed,
        is_match,
    )
    return MatchResult(mixed, displayed, is_match)


def format_difference(difference: float) -> str:
    """``12.3456`` → ``"12.35%"``."""
    return f"{round_channel(difference * 100) / 100:g}%"


__all__ = [
    "MAX_DIFFERENCE",
    "MATCH_TOLERANCE",
    "MatchResult",
    "evaluate_match",
    "format_difference",
]
