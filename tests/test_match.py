import numpy as np
import pytest

from color_match.colorspace import Color
from color_match.game import Round, new_round, random_color
from color_match.match import MAX_DIFFERENCE, evaluate_match, format_difference
from color_match.palette import KNOWN_COLORS

RED = KNOWN_COLORS["red"].color
WHITE = KNOWN_COLORS["white"].color
BLACK = KNOWN_COLORS["black"].color


def test_exact_match():
    result = evaluate_match({"#ff0000": 2}, RED)
    assert result.mixed == RED
    assert result.difference == 0.0
    assert result.is_match


def test_empty_mix_matches_white():
    result = evaluate_match({}, WHITE)
    assert result.mixed == WHITE
    assert result.is_match


def test_far_colors_do_not_match():
    result = evaluate_match({"#000000": 1}, WHITE)
    assert result.difference > 50
    assert not result.is_match


def test_difference_is_clamped():
    # achromatic mix, so chroma is unweighted and the raw ΔE is ~137
    result = evaluate_match({"#000000": 1}, Color(0, 0, 255))
    assert result.difference == MAX_DIFFERENCE


def test_format_difference():
    assert format_difference(12.3456) == "12.35%"
    assert format_difference(100.0) == "100%"
    assert format_difference(0.0) == "0%"


def test_random_color_range_and_seed():
    a = random_color(np.random.default_rng(7))
    b = random_color(np.random.default_rng(7))
    assert a == b
    for _ in range(50):
        c = random_color()
        assert all(0 <= v <= 255 and float(v).is_integer() for v in (c.r, c.g, c.b))


def test_new_round_is_empty():
    rnd = new_round(np.random.default_rng(1))
    assert rnd.picked == {}
    assert not rnd.won


def test_pick_and_win():
    rnd = Round(target=Color(255, 128, 128))
    rnd = rnd.pick(RED, 1)
    assert not rnd.won
    rnd = rnd.pick(WHITE, 1)
    assert rnd.picked == {"#ff0000": 1, "#ffffff": 1}
    assert rnd.won


def test_pick_negative_removes_and_floors():
    rnd = Round(target=BLACK).pick(RED, -1)
    assert rnd.picked == {"#ff0000": 0}
    # empty mix is white, target is black
    assert not rnd.won


def test_reset_keeps_target():
    rnd = Round(target=RED).pick(RED, 1)
    assert rnd.won
    reset = rnd.reset()
    assert reset.target == RED
    assert reset.picked == {}
    assert not reset.won
    assert rnd.picked == {"#ff0000": 1}


def test_new_color_keeps_picked():
    rnd = Round(target=RED).pick(RED, 1)
    other = rnd.new_color(np.random.default_rng(3))
    assert other.picked == rnd.picked
    assert other.target == random_color(np.random.default_rng(3))


@pytest.mark.parametrize("name", list(KNOWN_COLORS))
def test_every_swatch_matches_itself(name):
    color = KNOWN_COLORS[name].color
    assert Round(target=color).pick(color, 1).won


def test_new_color_recomputes_won():
    rnd = Round(target=RED).pick(RED, 1)
    assert rnd.won
    other = rnd.new_color(np.random.default_rng(3))
    assert other.won == evaluate_match(rnd.picked, other.target).is_match


class FixedRng:
    def __init__(self, *channels):
        self.channels = np.array(channels)

    def integers(self, low, high, size):
        return self.channels


def test_new_color_clears_stale_win():
    rnd = Round(target=RED).pick(RED, 1)
    assert rnd.won
    other = rnd.new_color(FixedRng(0, 0, 255))
    assert other.target == Color(0, 0, 255)
    assert not other.won
