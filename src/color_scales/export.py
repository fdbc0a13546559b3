"""Text exports of palette scales (Tailwind theme entries and CSS variables)."""

from __future__ import annotations

import re
from typing import Iterable

from .palette import tailwind_palette
from .utils import ColorScale

EXPORT_FORMATS = ("tailwind", "css")

_WS = re.compile(r"\s+")


def scale_slug(name: str) -> str:
    return _WS.sub("-", name.lower())


def tailwind_config(scales: Iterable[ColorScale]) -> str:
    blocks = []
    for scale in scales:
        palette = tailwind_palette(scale.base_color)
        body = ",\n".join(f"  {step}: '{color}'" for step, color in palette.as_dict().items())
        blocks.append(f"'{scale_slug(scale.name)}': {{\n{body}\n}}")
    return ",\n".join(blocks)


def css_variables(scales: Iterable[ColorScale]) -> str:
    blocks = []
    for scale in scales:
        slug = scale_slug(scale.name)
        palette = tailwind_palette(scale.base_color)
        blocks.append(
            "\n".join(f"--color-{slug}-{step}: {color};" for step, color in palette.as_dict().items())
        )
    return "\n\n".join(blocks)


def export_scales(scales: Iterable[ColorScale], fmt: str = "tailwind") -> str:
    fmt = (fmt or "tailwind").strip().lower()
    if fmt == "tailwind":
        return tailwind_config(scales)
    if fmt == "css":
        return css_variables(scales)
    raise ValueError(f"unknown export format '{fmt}', expected one of {EXPORT_FORMATS}")


__all__ = ["EXPORT_FORMATS", "css_variables", "export_scales", "scale_slug", "tailwind_config"]
