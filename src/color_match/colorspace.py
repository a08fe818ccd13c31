# colorspace.py – RGB ↔ HSL / HSV / CIE L*a*b* and hex helpers
#   - sRGB companding with gamma 2.4 and IEC thresholds
#   - D65 reference white, 4-decimal sRGB↔XYZ matrices
#   - CIE cube-root nonlinearity with the 7.787 linear segment

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

import numpy as np

Hex = str


class InvalidFormat(ValueError):
    """Raised when a string is not a 6-digit hex color."""


@dataclass(frozen=True)
class Color:
    """sRGB color, channels nominally in [0, 255] (not enforced)."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class HSLColor:
    h: float
    s: float
    l: float


@dataclass(frozen=True)
class HSVColor:
    h: float
    s: float
    v: float


@dataclass(frozen=True)
class LabColor:
    l: float
    a: float
    b: float


class TextColor(str, Enum):
    """Overlay text color that stays readable on a given background."""

    DARK = "rgba(0,0,0,0.5)"
    LIGHT = "rgba(255,255,255,0.5)"


# --- constants ---------------------------------------------------------------
_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

SRGB_THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308
SRGB_EXPONENT = 2.4
SRGB_A = 0.055

LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787
LAB_OFFSET = 16.0 / 116.0

TEXT_LIGHTNESS_THRESHOLD = 0.40

D65_WHITE = np.array([0.95047, 1.00000, 1.08883])

_RGB_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ]
)
_XYZ_RGB = np.array(
    [
        [3.2406, -1.5372, -0.4986],
        [-0.9689, 1.8758, 0.0415],
        [0.0557, -0.2040, 1.0570],
    ]
)


def round_channel(x: float) -> int:
    """Round half away from zero (127.5 → 128), unlike built-in ``round``."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


# --- hex ---------------------------------------------------------------------
def is_hex_color(value: object) -> bool:
    """True for ``#rrggbb`` / ``rrggbb`` strings, in any case."""
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def hex_to_rgb(hex_str: Hex) -> Color:
    m = _HEX_RE.match(hex_str) if isinstance(hex_str, str) else None
    if not m:
        raise InvalidFormat(f"invalid hex color: {hex_str!r}")
    r, g, b = (int(group, 16) for group in m.groups())
    return Color(r, g, b)


def rgb_to_hex(color: Color) -> Hex:
    """
    Format ``color`` as lowercase ``#rrggbb``.

    Channels must already be integral 8-bit values; anything else is
    truncated, not rounded, so round first (see ``round_channel``).
    """
    r, g, b = (int(c) for c in (color.r, color.g, color.b))
    return f"#{r:02x}{g:02x}{b:02x}"


# --- HSL / HSV ---------------------------------------------------------------
def _hue(r: float, g: float, b: float, mx: float, d: float) -> float:
    if mx == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif mx == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    return h / 6.0


def rgb_to_hsl(color: Color) -> HSLColor:
    """RGB in [0, 255] → HSL with every component in [0, 1]."""
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2.0

    if mx == mn:
        return HSLColor(0.0, 0.0, l)  # achromatic

    d = mx - mn
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    return HSLColor(_hue(r, g, b, mx, d), s, l)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(hsl: HSLColor) -> Color:
    h, s, l = hsl.h, hsl.s, hsl.l
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_rgb(p, q, h + 1.0 / 3.0)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1.0 / 3.0)
    return Color(r * 255.0, g * 255.0, b * 255.0)


def rgb_to_hsv(color: Color) -> HSVColor:
    """RGB in [0, 255] → HSV with every component in [0, 1]."""
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    mx, mn = max(r, g, b), min(r, g, b)
    d = mx - mn
    s = 0.0 if mx == 0 else d / mx
    h = 0.0 if mx == mn else _hue(r, g, b, mx, d)
    return HSVColor(h, s, mx)


def hsv_to_rgb(hsv: HSVColor) -> Color:
    h, s, v = hsv.h, hsv.s, hsv.v
    i = math.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i % 6]
    return Color(r * 255.0, g * 255.0, b * 255.0)


# --- IEC 61966-2-1 companding ------------------------------------------------
def _uncompand(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    m = v > SRGB_THRESHOLD
    out = np.empty_like(v)
    out[m] = ((v[m] + SRGB_A) / (1.0 + SRGB_A)) ** SRGB_EXPONENT
    out[~m] = v[~m] / 12.92
    return out


def _compand(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    m = v > LINEAR_THRESHOLD
    out = np.empty_like(v)
    out[m] = (1.0 + SRGB_A) * np.power(v[m], 1.0 / SRGB_EXPONENT) - SRGB_A
    out[~m] = v[~m] * 12.92
    return out


# --- CIE L*a*b* --------------------------------------------------------------
def _lab_f(t: np.ndarray) -> np.ndarray:
    m = t > LAB_EPSILON
    out = np.empty_like(t)
    out[m] = np.cbrt(t[m])
    out[~m] = LAB_KAPPA * t[~m] + LAB_OFFSET
    return out


def _lab_f_inv(t: np.ndarray) -> np.ndarray:
    cubed = t**3
    return np.where(cubed > LAB_EPSILON, cubed, (t - LAB_OFFSET) / LAB_KAPPA)


def rgb2lab(color: Color) -> LabColor:
    """sRGB in [0, 255] → CIE L*a*b* (D65). Out-of-range input is not clamped."""
    rgb = np.array([color.r, color.g, color.b], dtype=np.float64) / 255.0
    xyz = (_RGB_XYZ @ _uncompand(rgb)) / D65_WHITE
    fx, fy, fz = _lab_f(xyz)
    return LabColor(
        float(116.0 * fy - 16.0),
        float(500.0 * (fx - fy)),
        float(200.0 * (fy - fz)),
    )


def lab2rgb(lab: LabColor) -> Color:
    """CIE L*a*b* (D65) → sRGB in [0, 255], clipped to the displayable range."""
    fy = (lab.l + 16.0) / 116.0
    f = np.array([lab.a / 500.0 + fy, fy, fy - lab.b / 200.0], dtype=np.float64)
    xyz = D65_WHITE * _lab_f_inv(f)
    rgb = np.clip(_compand(_XYZ_RGB @ xyz), 0.0, 1.0) * 255.0
    r, g, b = (float(c) for c in rgb)
    return Color(r, g, b)


def get_text_color(color: Color) -> TextColor:
    """Dark text on light backgrounds, light text on dark ones."""
    if rgb_to_hsl(color).l > TEXT_LIGHTNESS_THRESHOLD:
        return TextColor.DARK
    return TextColor.LIGHT


__all__ = [
    "Color",
    "HSLColor",
    "HSVColor",
    "LabColor",
    "TextColor",
    "InvalidFormat",
    "is_hex_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb2lab",
    "lab2rgb",
    "get_text_color",
    "round_channel",
]
