# game.py – one round of "mix the palette until it matches the target"

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np

from .colorspace import Color
from .match import MatchResult, evaluate_match
from .mixer import PickedColor, add_picked_color, remove_picked_color

log = logging.getLogger(__name__)


def random_color(rng: Optional[np.random.Generator] = None) -> Color:
    """Three independent uniform channels in [0, 255]."""
    rng = rng if rng is not None else np.random.default_rng()
    r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
    return Color(r, g, b)


@dataclass(frozen=True)
class Round:
    target: Color
    picked: PickedColor = field(default_factory=dict)
    won: bool = False

    def evaluate(self) -> MatchResult:
        return evaluate_match(self.picked, self.target)

    def pick(self, color: Color, quantity: int) -> Round:
        """Add one unit of ``color`` for a positive quantity, otherwise remove one."""
        if quantity > 0:
            picked = add_picked_color(self.picked, color)
        else:
            picked = remove_picked_color(self.picked, color)
        won = evaluate_match(picked, self.target).is_match
        if won and not self.won:
            log.info("round won with %s", dict(picked))
        return replace(self, picked=picked, won=won)

    def reset(self) -> Round:
        return replace(self, picked={}, won=False)

    def new_color(self, rng: Optional[np.random.Generator] = None) -> Round:
        target = random_color(rng)
        won = evaluate_match(self.picked, target).is_match
        return replace(self, target=target, won=won)


def new_round(rng: Optional[np.random.Generator] = None) -> Round:
    return Round(target=random_color(rng))


__all__ = ["Round", "new_round", "random_color"]
