"""
Pure-Python sRGB to OKLCH conversion.

Used by the `oklch` color format. No external color libraries required.
"""

from __future__ import annotations

import math


def _srgb_to_linear(channel: float) -> float:
    """Undo the sRGB transfer curve for one 0-1 channel."""
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def rgb_to_oklch(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 0-255 sRGB channels to OKLCH.

    Args:
        r: Red (0-255).
        g: Green (0-255).
        b: Blue (0-255).

    Returns:
        (lightness 0-1, chroma, hue 0-360). Hue is 0 for achromatic colors.
    """
    lr = _srgb_to_linear(r / 255)
    lg = _srgb_to_linear(g / 255)
    lb = _srgb_to_linear(b / 255)

    # Linear sRGB -> LMS (cube-rooted)
    l_ = math.cbrt(0.4122214708 * lr + 0.5363325363 * lg + 0.0514459929 * lb)
    m_ = math.cbrt(0.2119034982 * lr + 0.6806995451 * lg + 0.1073969566 * lb)
    s_ = math.cbrt(0.0883024619 * lr + 0.2817188376 * lg + 0.6299787005 * lb)

    # LMS -> OKLab
    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b_ = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    C = math.hypot(a, b_)
    if C < 1e-4:
        return L, 0.0, 0.0
    H = math.degrees(math.atan2(b_, a)) % 360
    return L, C, H


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0, decimals: int = 3) -> str:
    """Format an OKLCH color as a CSS string.

    Args:
        L: Lightness (0-1).
        C: Chroma (0-0.4).
        H: Hue (0-360).
        alpha: Opacity (0-1).
        decimals: Digits kept for lightness and chroma.

    Returns:
        CSS oklch() string.
    """
    L_fmt = f"{L:.{decimals}f}"
    C_fmt = f"{C:.{decimals + 1}f}"
    H_fmt = f"{H:.1f}"
    if alpha < 1.0:
        return f"oklch({L_fmt} {C_fmt} {H_fmt} / {alpha:.2f})"
    return f"oklch({L_fmt} {C_fmt} {H_fmt})"
