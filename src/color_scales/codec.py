"""Conversions between hex, RGB, HSL and OKLCH.

HSL is always exposed in percent form (h in degrees, s and l in [0, 100]).
The fractional form (s and l in [0, 1]) only exists inside the RGB <-> HSL
primitives below and is never returned to callers.

OKLCH goes through ColorAide so that out-of-gamut results are fitted back
into sRGB instead of being clipped channel by channel.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Mapping, NamedTuple, Optional

from coloraide import Color

log = logging.getLogger(__name__)

Hex = str

BLACK: Hex = "#000000"
FIT_HEX = {"method": "raytrace"}  # gamut-fit in OkLCh for hex output

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


class InvalidFormat(ValueError):
    """Raised when a string is not a 6 digit hex color."""


class RgbColor(NamedTuple):
    r: int
    g: int
    b: int


class HslColor(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float  # percent
    l: float  # percent


class OklchColor(NamedTuple):
    l: float
    c: float
    h: Optional[float]  # None when achromatic

    @property
    def achromatic(self) -> bool:
        return self.h is None


def _round(x: float) -> int:
    # Math.round semantics; Python's round() is round-half-even
    return int(math.floor(x + 0.5))


def _digits(hex_color: str) -> str:
    if not isinstance(hex_color, str):
        raise InvalidFormat(f"expected a hex string, got {type(hex_color).__name__}")
    raw = hex_color.lstrip("#")
    if not _HEX_RE.fullmatch(raw):
        raise InvalidFormat(
            f'invalid hex color {hex_color!r}; expected "RRGGBB" or "#RRGGBB"'
        )
    return raw


def normalize_hex(hex_color: str) -> Hex:
    """Canonical '#rrggbb' form of a valid hex color."""
    return "#" + _digits(hex_color).lower()


# --- hex <-> rgb ----------------------------------------------------------------


def hex_to_rgb(hex_color: str) -> RgbColor:
    raw = _digits(hex_color)
    return RgbColor(int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> Hex:
    def _byte(c: float) -> int:
        return int(max(0.0, min(255.0, c)))

    return "#" + "".join(f"{_byte(c):02x}" for c in (r, g, b))


# --- rgb <-> hsl ----------------------------------------------------------------


def _rgb_to_hsl_fractions(r: float, g: float, b: float) -> tuple[float, float, float]:
    """RGB bytes -> (hue degrees, saturation 0..1, lightness 0..1)."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    h = s = 0.0
    l = (mx + mn) / 2.0

    if mx != mn:
        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
        # ties resolve in r, g, b order
        if mx == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif mx == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6.0

    return h * 360.0, s, l


def _hue_to_channel(p: float, q: float, t: float) -> float:
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


def _hsl_fractions_to_rgb(h: float, s: float, l: float) -> RgbColor:
    h /= 360.0
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return RgbColor(_round(r * 255), _round(g * 255), _round(b * 255))


def _clamp_pct(v: float) -> float:
    return max(0.0, min(100.0, v))


def rgb_to_hsl(r: float, g: float, b: float) -> HslColor:
    h, s, l = _rgb_to_hsl_fractions(r, g, b)
    return HslColor(h, s * 100.0, l * 100.0)


def hsl_to_rgb(h: float, s: float, l: float) -> RgbColor:
    return _hsl_fractions_to_rgb(h % 360.0, _clamp_pct(s) / 100.0, _clamp_pct(l) / 100.0)


def hex_to_hsl(hex_color: str) -> HslColor:
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h: float, s: float, l: float) -> Hex:
    """Sector-based HSL -> hex.

    Differs from ``hsl_to_rgb`` on a handful of rounding boundaries; kept
    separate because contrast tones are defined in terms of this path.
    """
    h = h % 360.0
    s = _clamp_pct(s) / 100.0
    l = _clamp_pct(l) / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return rgb_to_hex(*(_round((v + m) * 255) for v in (r, g, b)))


# --- oklch ----------------------------------------------------------------------


def hex_to_oklch(hex_color: str) -> OklchColor:
    oklch = Color(normalize_hex(hex_color)).convert("oklch")
    l, c, h = (float(v) for v in oklch.coords())
    if math.isnan(h) or oklch.is_achromatic():
        return OklchColor(l, 0.0 if math.isnan(c) else c, None)
    return OklchColor(l, c, h % 360.0)


def oklch_to_hex(color: OklchColor, fit: Optional[Mapping[str, str]] = None) -> Hex:
    """Fit an OKLCH color into sRGB; black when it cannot be represented."""
    l, c, h = color
    h = 0.0 if h is None else h
    if not all(math.isfinite(v) for v in (l, c, h)):
        log.debug("non-finite oklch %r, falling back to black", color)
        return BLACK
    try:
        return (
            Color("oklch", [l, max(0.0, c), h % 360.0])
            .convert("srgb")
            .to_string(hex=True, fit=dict(fit or FIT_HEX))
        )
    except (ValueError, ZeroDivisionError, OverflowError):
        log.debug("oklch %r not representable, falling back to black", color)
        return BLACK


__all__ = [
    "BLACK",
    "FIT_HEX",
    "Hex",
    "HslColor",
    "InvalidFormat",
    "OklchColor",
    "RgbColor",
    "hex_to_hsl",
    "hex_to_oklch",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsl_to_rgb",
    "normalize_hex",
    "oklch_to_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
]
