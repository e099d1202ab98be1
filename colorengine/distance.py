"""Perceptual distance between LAB colors (CIE94, graphic-arts weights)."""

import math

from colorengine.convert import LAB

def delta_e(lab_a: LAB, lab_b: LAB) -> float:
    """CIE94 distance from lab_a to lab_b.

    The chroma weighting uses lab_a only, so the result is not symmetric
    for colors of different chroma. Callers pass the palette entry first.
    """
    delta_l = lab_a[0] - lab_b[0]
    delta_a = lab_a[1] - lab_b[1]
    delta_b = lab_a[2] - lab_b[2]
    c1 = math.sqrt(lab_a[1] * lab_a[1] + lab_a[2] * lab_a[2])
    c2 = math.sqrt(lab_b[1] * lab_b[1] + lab_b[2] * lab_b[2])
    delta_c = c1 - c2
    delta_h = delta_a * delta_a + delta_b * delta_b - delta_c * delta_c
    delta_h = 0.0 if delta_h < 0 else math.sqrt(delta_h)
    sc = 1.0 + 0.045 * c1
    sh = 1.0 + 0.015 * c1
    i = delta_l * delta_l + (delta_c / sc) ** 2 + (delta_h / sh) ** 2
    return 0.0 if i < 0 else math.sqrt(i)
