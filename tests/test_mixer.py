import itertools

from color_match.colorspace import Color
from color_match.mixer import (
    add_picked_color,
    calculate_color,
    quantity,
    remove_picked_color,
)
from color_match.palette import BASIC_PALETTE, KNOWN_COLORS

RED = KNOWN_COLORS["red"].color
WHITE = KNOWN_COLORS["white"].color
BLUE = KNOWN_COLORS["blue"].color
YELLOW = KNOWN_COLORS["yellow"].color


def test_basic_palette_order_and_values():
    names = [e.name for e in BASIC_PALETTE]
    assert names == ["yellow", "red", "magenta", "blue", "cyan", "green", "white", "black"]
    assert KNOWN_COLORS["magenta"].color == Color(255, 0, 171)
    assert KNOWN_COLORS["green"].color == Color(0, 181, 0)


def test_empty_mix_is_white():
    assert calculate_color({}) == Color(255, 255, 255)


def test_all_zero_quantities_is_white():
    picked = remove_picked_color({}, RED)
    assert picked == {"#ff0000": 0}
    assert calculate_color(picked) == Color(255, 255, 255)


def test_red_and_white_rounds_half_up():
    picked = add_picked_color(add_picked_color({}, RED), WHITE)
    assert calculate_color(picked) == Color(255, 128, 128)


def test_single_color_is_itself():
    picked = add_picked_color({}, BLUE, 3)
    assert calculate_color(picked) == BLUE


def test_add_does_not_mutate():
    original = {"#ff0000": 1}
    updated = add_picked_color(original, RED, 2)
    assert original == {"#ff0000": 1}
    assert updated == {"#ff0000": 3}


def test_remove_floors_at_zero():
    picked = add_picked_color({}, YELLOW)
    for _ in range(5):
        picked = remove_picked_color(picked, YELLOW)
        assert quantity(picked, YELLOW) >= 0
    assert picked["#ffed00"] == 0


def test_remove_does_not_mutate():
    original = {"#ff0000": 2}
    updated = remove_picked_color(original, RED)
    assert original == {"#ff0000": 2}
    assert updated == {"#ff0000": 1}


def test_quantity_absent_is_zero():
    assert quantity({}, RED) == 0
    assert quantity({"#ff0000": 0}, RED) == 0


def test_order_independent():
    items = [("#ff0000", 3), ("#0047ab", 1), ("#ffed00", 2), ("#000000", 5)]
    expected = calculate_color(dict(items))
    for perm in itertools.permutations(items):
        assert calculate_color(dict(perm)) == expected


def test_weighted_average():
    picked = {"#ff0000": 3, "#0000ff": 1}
    # r = 765 / 4 = 191.25, b = 255 / 4 = 63.75
    assert calculate_color(picked) == Color(191, 0, 64)


def test_huge_quantities_stay_exact():
    assert calculate_color({"#ff0000": 2**62}) == RED
    assert calculate_color({"#ff0000": 2**64}) == RED
    assert calculate_color({"#ff0000": 2**80, "#ffffff": 2**80}) == Color(255, 128, 128)
