from __future__ import annotations

import random
import string
from dataclasses import dataclass
from typing import Optional

from .codec import Hex, InvalidFormat, normalize_hex

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 7


def is_valid_hex_color(value: str) -> bool:
    """True for 'RRGGBB' or '#RRGGBB', any case."""
    try:
        normalize_hex(value)
    except InvalidFormat:
        return False
    return True


def random_hex_color(rng: Optional[random.Random] = None) -> Hex:
    # not for anything security related
    n = (rng or random).randrange(0x1000000)
    return f"#{n:06x}"


def _random_id(rng: Optional[random.Random] = None) -> str:
    r = rng or random
    return "".join(r.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


@dataclass(frozen=True)
class ColorScale:
    """One named scale as the UI keeps it: the palette is derived on demand."""

    id: str
    name: str
    base_color: Hex


def create_color_scale(
    base_color: Optional[str] = None,
    name: str = "Primary",
    *,
    rng: Optional[random.Random] = None,
) -> ColorScale:
    color = normalize_hex(base_color) if base_color else random_hex_color(rng)
    return ColorScale(id=_random_id(rng), name=name, base_color=color)


__all__ = ["ColorScale", "create_color_scale", "is_valid_hex_color", "random_hex_color"]
