# distance.py – CIE94-style ΔE (graphic-arts weights, kL = kC = kH = 1)

from __future__ import annotations

from math import sqrt

from .colorspace import LabColor

K1 = 0.045
K2 = 0.015


def delta_e(lab_a: LabColor, lab_b: LabColor) -> float:
    """
    Perceptual distance between two Lab colors.

    Both chroma weights are taken from ``lab_a`` only, so the result is not
    symmetric: ``delta_e(a, b) != delta_e(b, a)`` whenever the chromas differ.
    The match tolerance is tuned against exactly this behaviour.
    """
    delta_l = lab_a.l - lab_b.l
    delta_a = lab_a.a - lab_b.a
    delta_b = lab_a.b - lab_b.b

    c1 = sqrt(lab_a.a * lab_a.a + lab_a.b * lab_a.b)
    c2 = sqrt(lab_b.a * lab_b.a + lab_b.b * lab_b.b)
    delta_c = c1 - c2

    # float error can push this slightly below zero
    delta_h = delta_a * delta_a + delta_b * delta_b - delta_c * delta_c
    delta_h = 0.0 if delta_h < 0 else sqrt(delta_h)

    sc = 1.0 + K1 * c1
    sh = 1.0 + K2 * c1

    i = delta_l**2 + (delta_c / sc) ** 2 + (delta_h / sh) ** 2
    return 0.0 if i < 0 else sqrt(i)


__all__ = ["delta_e"]
