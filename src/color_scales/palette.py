"""Tailwind-style shade scales and hue-rotation harmonies.

The scale walks a fixed OKLCH lightness curve while keeping the base color's
hue, scaling its chroma down toward the light and dark ends so the extremes
do not turn muddy.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from .codec import (
    FIT_HEX,
    Hex,
    OklchColor,
    RgbColor,
    _hsl_fractions_to_rgb,
    _rgb_to_hsl_fractions,
    hex_to_oklch,
    hex_to_rgb,
    normalize_hex,
    oklch_to_hex,
    rgb_to_hex,
)

log = logging.getLogger(__name__)

ToneStep = int

TONE_STEPS: tuple[ToneStep, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# OKLCH target lightness per step
TAILWIND_LIGHTNESS: Mapping[ToneStep, float] = MappingProxyType(
    {
        50: 0.97,
        100: 0.93,
        200: 0.87,
        300: 0.78,
        400: 0.66,
        500: 0.55,
        600: 0.48,
        700: 0.40,
        800: 0.33,
        900: 0.25,
        950: 0.18,
    }
)


def chroma_multiplier(step: ToneStep) -> float:
    # order matters: 800 and 900 must hit the >= branches
    if step <= 100:
        return 0.6
    if step <= 200:
        return 0.8
    if step >= 900:
        return 0.7
    if step >= 800:
        return 0.85
    return 1.0


@dataclass(frozen=True)
class PaletteConfig:
    steps: tuple[ToneStep, ...] = TONE_STEPS
    lightness: Mapping[ToneStep, float] = field(
        default_factory=lambda: TAILWIND_LIGHTNESS, hash=False
    )
    fit: Mapping[str, str] = field(default_factory=lambda: FIT_HEX, hash=False)

    def __post_init__(self) -> None:
        missing = [s for s in self.steps if s not in self.lightness]
        if missing:
            raise ValueError(f"no target lightness for steps {missing}")
        if list(self.steps) != sorted(self.steps):
            raise ValueError("steps must be in ascending order")
        ls = [self.lightness[s] for s in self.steps]
        if any(a <= b for a, b in zip(ls, ls[1:])):
            raise ValueError("lightness must strictly decrease as the step grows")
        object.__setattr__(self, "lightness", MappingProxyType(dict(self.lightness)))
        object.__setattr__(self, "fit", MappingProxyType(dict(self.fit)))


DEFAULT_CONFIG = PaletteConfig()


@dataclass(frozen=True)
class PaletteScale(Sequence):
    """Shades of one base color, index-aligned with ``steps``."""

    base: Hex
    steps: tuple[ToneStep, ...]
    colors: tuple[Hex, ...]

    def __post_init__(self) -> None:
        if len(self.steps) != len(self.colors):
            raise ValueError("steps and colors must have the same length")

    def __getitem__(self, index):
        return self.colors[index]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self.colors)

    def shade(self, step: ToneStep) -> Hex:
        try:
            return self.colors[self.steps.index(step)]
        except ValueError:
            raise KeyError(step) from None

    def as_dict(self) -> dict[ToneStep, Hex]:
        return dict(zip(self.steps, self.colors))


@dataclass
class PaletteEngine:
    config: PaletteConfig = DEFAULT_CONFIG

    def shade_oklch(self, base: OklchColor, step: ToneStep) -> OklchColor:
        # achromatic bases carry no chroma and no hue
        c0 = 0.0 if base.achromatic else base.c
        return OklchColor(self.config.lightness[step], c0 * chroma_multiplier(step), base.h)

    def generate(self, base_hex: Hex) -> PaletteScale:
        base_hex = normalize_hex(base_hex)
        base = hex_to_oklch(base_hex)
        log.debug("palette for %s from oklch %r", base_hex, base)
        colors = tuple(
            oklch_to_hex(self.shade_oklch(base, step), self.config.fit)
            for step in self.config.steps
        )
        return PaletteScale(base=base_hex, steps=self.config.steps, colors=colors)


@lru_cache(maxsize=1024)
def _default_palette(base_hex: Hex) -> PaletteScale:
    return PaletteEngine().generate(base_hex)


def tailwind_palette(base_hex: Hex, config: Optional[PaletteConfig] = None) -> PaletteScale:
    if config is None:
        return _default_palette(normalize_hex(base_hex))
    return PaletteEngine(config).generate(base_hex)


# --- harmonies (HSL hue rotation) -------------------------------------------------


def _hue_offset(hex_color: Hex, degrees: float) -> RgbColor:
    h, s, l = _rgb_to_hsl_fractions(*hex_to_rgb(hex_color))
    h = (h + degrees) % 360.0
    return _hsl_fractions_to_rgb(h, s, l)


def _to_hex(rgbs: Sequence[RgbColor]) -> list[Hex]:
    return [rgb_to_hex(*c) for c in rgbs]


def analogous(hex_color: Hex) -> list[Hex]:
    return _to_hex([_hue_offset(hex_color, -30), _hue_offset(hex_color, 30)])


def complementary(hex_color: Hex) -> Hex:
    return rgb_to_hex(*_hue_offset(hex_color, 180))


def triadic(hex_color: Hex) -> list[Hex]:
    return _to_hex([_hue_offset(hex_color, -120), _hue_offset(hex_color, 120)])


def tetradic(hex_color1: Hex, hex_color2: Hex) -> list[Hex]:
    return [complementary(hex_color1), complementary(hex_color2)]


def quadratic(hex_color: Hex) -> list[Hex]:
    return _to_hex(
        [
            _hue_offset(hex_color, -90),
            hex_to_rgb(complementary(hex_color)),
            _hue_offset(hex_color, 90),
        ]
    )


def split_complementary(hex_color: Hex) -> list[Hex]:
    return analogous(complementary(hex_color))


def monochromatic(hex_color: Hex, count: int) -> list[Hex]:
    """``count`` lightness variants evenly spaced strictly inside (0, 1)."""
    if count < 0:
        raise ValueError("count must be >= 0")
    h, s, _ = _rgb_to_hsl_fractions(*hex_to_rgb(hex_color))
    dl = 1.0 / (count + 1)
    return _to_hex([_hsl_fractions_to_rgb(h, s, dl * i) for i in range(1, count + 1)])


HARMONIES = {
    "analogous": analogous,
    "complementary": complementary,
    "triadic": triadic,
    "quadratic": quadratic,
    "split_complementary": split_complementary,
}


__all__ = [
    "DEFAULT_CONFIG",
    "HARMONIES",
    "PaletteConfig",
    "PaletteEngine",
    "PaletteScale",
    "TAILWIND_LIGHTNESS",
    "TONE_STEPS",
    "analogous",
    "chroma_multiplier",
    "complementary",
    "monochromatic",
    "quadratic",
    "split_complementary",
    "tailwind_palette",
    "tetradic",
    "triadic",
]
