"""
Numeric color-space conversions with sRGB as the hub.
Supported: HSL, CIELAB (D65, via XYZ), CMYK.
RGB components are 0-255 floats; HSL/CMYK are 0-1 unless noted.
"""

import math
from typing import Tuple

RGB = Tuple[float, float, float]
HSL = Tuple[float, float, float]
LAB = Tuple[float, float, float]
CMYK = Tuple[float, float, float, float]

# D65 reference white
XR, YR, ZR = 0.95047, 1.0, 1.08883

LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787

def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))

def round_half_up(x: float) -> int:
    """Round to nearest integer, halves away from negative infinity."""
    return int(math.floor(x + 0.5))

def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation; returns a untouched when a and b are effectively equal."""
    if abs(b - a) < 0.0001:
        return a
    return a + (b - a) * t

# HSL -------------------------------------------------------------

def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB (0-255) to HSL, all three in [0, 1]."""
    r, g, b = r / 255, g / 255, b / 255
    vmax = max(r, g, b)
    vmin = min(r, g, b)
    l = (vmax + vmin) / 2

    if vmax == vmin:
        return 0.0, 0.0, l  # achromatic

    d = vmax - vmin
    s = d / (2 - vmax - vmin) if l > 0.5 else d / (vmax + vmin)
    if vmax == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif vmax == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6, s, l

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """One channel of HSL -> RGB for hue offset t."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL in [0, 1] to integer RGB (0-255)."""
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1 / 3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1 / 3)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)

# LAB -------------------------------------------------------------

def s_to_lin(c: float) -> float:
    """sRGB companding, c in [0, 1]."""
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92

def lin_to_s(l: float) -> float:
    """Linear to sRGB, unclamped."""
    return 1.055 * (l ** (1 / 2.4)) - 0.055 if l > 0.0031308 else 12.92 * l

def f_lab(t: float) -> float:
    """LAB forward transform."""
    return t ** (1 / 3) if t > LAB_EPSILON else LAB_KAPPA * t + 16 / 116

def f_inv_lab(t: float) -> float:
    """LAB inverse transform."""
    t3 = t * t * t
    return t3 if t3 > LAB_EPSILON else (t - 16 / 116) / LAB_KAPPA

def rgb_to_lab(rgb: RGB) -> LAB:
    """Convert RGB (0-255) to LAB: L 0-100, a/b roughly -128..127."""
    R = s_to_lin(rgb[0] / 255)
    G = s_to_lin(rgb[1] / 255)
    B = s_to_lin(rgb[2] / 255)

    x = (R * 0.4124 + G * 0.3576 + B * 0.1805) / XR
    y = (R * 0.2126 + G * 0.7152 + B * 0.0722) / YR
    z = (R * 0.0193 + G * 0.1192 + B * 0.9505) / ZR

    fx, fy, fz = f_lab(x), f_lab(y), f_lab(z)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

def lab_to_rgb(lab: LAB) -> RGB:
    """Convert LAB to RGB (0-255). Output is clamped but not rounded."""
    fy = (lab[0] + 16) / 116
    fx = lab[1] / 500 + fy
    fz = fy - lab[2] / 200

    x = XR * f_inv_lab(fx)
    y = YR * f_inv_lab(fy)
    z = ZR * f_inv_lab(fz)

    R = x * 3.2406 + y * -1.5372 + z * -0.4986
    G = x * -0.9689 + y * 1.8758 + z * 0.0415
    B = x * 0.0557 + y * -0.2040 + z * 1.0570

    return (
        clamp(lin_to_s(R), 0, 1) * 255,
        clamp(lin_to_s(G), 0, 1) * 255,
        clamp(lin_to_s(B), 0, 1) * 255,
    )

# CMYK ------------------------------------------------------------

def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """Convert RGB (0-255) to CMYK, each in [0, 1].

    Pure black makes (1 - k) zero; the resulting 0/0 terms come out as 0.
    """
    R, G, B = r / 255, g / 255, b / 255
    K = 1 - max(R, G, B)

    def channel(v: float) -> float:
        if 1 - K == 0:
            return 0.0
        c = (1 - v - K) / (1 - K)
        return 0.0 if math.isnan(c) else clamp(c, 0, 1)

    return channel(R), channel(G), channel(B), clamp(K, 0, 1)

def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tuple[int, int, int]:
    """Convert CMYK in [0, 1] to integer RGB (0-255)."""
    return (
        round_half_up(255 * (1 - c) * (1 - k)),
        round_half_up(255 * (1 - m) * (1 - k)),
        round_half_up(255 * (1 - y) * (1 - k)),
    )
