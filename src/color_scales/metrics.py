from __future__ import annotations

import math

import numpy as np

from .codec import Hex, HslColor, hex_to_hsl, hsl_to_hex

# Hue dominates how people name colors
HUE_WEIGHT = 2.0
SAT_WEIGHT = 1.0
LIGHT_WEIGHT = 1.0

# contrast_tone heuristic, tuned by eye
COOL_BAND = (200.0, 290.0)
MIDTONE_BUMP = 20.0
DARKEN_BY = 65.0
LIGHTEN_BY = 75.0


def _hue_gap(h1: float, h2: float) -> float:
    d = abs(h1 - h2)
    return 360.0 - d if d > 180.0 else d


def hsl_distance(a: HslColor, b: HslColor) -> float:
    """Weighted distance between two percent-form HSL colors, hue wraps at 360."""
    dh = _hue_gap(a[0], b[0])
    return math.sqrt(
        (dh * HUE_WEIGHT) ** 2
        + (a[1] - b[1]) ** 2 * SAT_WEIGHT
        + (a[2] - b[2]) ** 2 * LIGHT_WEIGHT
    )


def hsl_distances(query: HslColor, table: np.ndarray) -> np.ndarray:
    """``hsl_distance`` from ``query`` to every row of an (N, 3) HSL array."""
    table = np.asarray(table, dtype=np.float64)
    dh = np.abs(query[0] - table[:, 0])
    dh = np.where(dh > 180.0, 360.0 - dh, dh)
    return np.sqrt(
        (dh * HUE_WEIGHT) ** 2
        + (query[1] - table[:, 1]) ** 2 * SAT_WEIGHT
        + (query[2] - table[:, 2]) ** 2 * LIGHT_WEIGHT
    )


def contrast_tone(hex_color: str) -> Hex:
    """A tone of the same hue that stays legible on top of ``hex_color``."""
    h, s, l = hex_to_hsl(hex_color)

    lo, hi = COOL_BAND
    if l == 50 and not (lo < h < hi):
        l += MIDTONE_BUMP
    l = l - DARKEN_BY if l > 50 else l + LIGHTEN_BY
    l = max(0.0, min(100.0, l))

    return hsl_to_hex(h, s, l)


__all__ = ["contrast_tone", "hsl_distance", "hsl_distances"]
