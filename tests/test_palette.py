import numpy as np
import pytest

from color_scales.codec import InvalidFormat, hex_to_hsl, hex_to_oklch
from color_scales.palette import (
    TAILWIND_LIGHTNESS,
    TONE_STEPS,
    PaletteConfig,
    PaletteEngine,
    analogous,
    chroma_multiplier,
    complementary,
    monochromatic,
    quadratic,
    split_complementary,
    tailwind_palette,
    tetradic,
    triadic,
)

BASES = ["#3b82f6", "#ef4444", "#22c55e", "#eab308", "#a855f7", "#64748b", "#000000", "#ffffff"]


def hue_gap(a, b):
    return abs(((a - b + 180.0) % 360.0) - 180.0)


def test_lightness_table_is_exact():
    assert TONE_STEPS == (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
    assert [TAILWIND_LIGHTNESS[s] for s in TONE_STEPS] == [
        0.97, 0.93, 0.87, 0.78, 0.66, 0.55, 0.48, 0.40, 0.33, 0.25, 0.18,
    ]


def test_chroma_multiplier_thresholds():
    got = [chroma_multiplier(s) for s in TONE_STEPS]
    assert got == [0.6, 0.6, 0.8, 1.0, 1.0, 1.0, 1.0, 1.0, 0.85, 0.7, 0.7]


@pytest.mark.parametrize("base", BASES)
def test_scale_has_eleven_steps_in_order(base):
    scale = tailwind_palette(base)
    assert len(scale) == 11
    assert scale.steps == TONE_STEPS
    assert list(scale.as_dict()) == list(TONE_STEPS)
    assert all(c.startswith("#") and len(c) == 7 and c == c.lower() for c in scale)


@pytest.mark.parametrize("base", BASES)
def test_lightness_strictly_decreases(base):
    ls = [hex_to_oklch(c).l for c in tailwind_palette(base)]
    assert all(a > b for a, b in zip(ls, ls[1:]))


@pytest.mark.parametrize("base", ["#3b82f6", "#ef4444", "#22c55e", "#a855f7"])
def test_hue_preserved_where_chroma_survives(base):
    h0 = hex_to_oklch(base).h
    for color in tailwind_palette(base):
        o = hex_to_oklch(color)
        if o.h is None or o.c < 0.08:
            continue
        assert hue_gap(o.h, h0) < 3.0


def test_blue_scenario():
    base = hex_to_oklch("#3b82f6")
    scale = tailwind_palette("#3b82f6")

    mid = hex_to_oklch(scale.shade(500))
    assert mid.l == pytest.approx(0.55, abs=0.01)
    assert hue_gap(mid.h, base.h) < 2.0

    light = hex_to_oklch(scale.shade(50))
    assert light.l == pytest.approx(0.97, abs=0.01)
    assert light.c <= base.c * 0.6 + 1e-3

    dark = hex_to_oklch(scale.shade(950))
    assert dark.l == pytest.approx(0.18, abs=0.01)
    assert dark.c <= base.c * 0.7 + 1e-3


def test_shade_oklch_applies_multiplier_and_keeps_hue():
    engine = PaletteEngine()
    base = hex_to_oklch("#3b82f6")
    for step in TONE_STEPS:
        o = engine.shade_oklch(base, step)
        assert o.l == TAILWIND_LIGHTNESS[step]
        assert o.c == pytest.approx(base.c * chroma_multiplier(step))
        assert o.h == base.h


def test_achromatic_base_gives_gray_scale():
    for color in tailwind_palette("#808080"):
        r, g, b = (int(color[i : i + 2], 16) for i in (1, 3, 5))
        assert max(r, g, b) - min(r, g, b) <= 1


def test_generate_is_deterministic_and_case_insensitive():
    a = PaletteEngine().generate("3B82F6")
    b = tailwind_palette("#3b82f6")
    assert a == b
    assert a.base == "#3b82f6"


def test_generate_rejects_bad_hex():
    with pytest.raises(InvalidFormat):
        tailwind_palette("#3b82f")


def test_shade_unknown_step():
    with pytest.raises(KeyError):
        tailwind_palette("#3b82f6").shade(550)


def test_custom_config():
    config = PaletteConfig(steps=(100, 500, 900), lightness={100: 0.9, 500: 0.6, 900: 0.2})
    scale = tailwind_palette("#3b82f6", config)
    assert len(scale) == 3
    assert scale.as_dict().keys() == {100, 500, 900}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"steps": (100, 500), "lightness": {100: 0.9}},
        {"steps": (500, 100), "lightness": {100: 0.9, 500: 0.5}},
        {"steps": (100, 500), "lightness": {100: 0.4, 500: 0.5}},
    ],
)
def test_inconsistent_config_rejected(kwargs):
    with pytest.raises(ValueError):
        PaletteConfig(**kwargs)


# --- harmonies ----------------------------------------------------------------------


def hue_of(hex_color):
    return hex_to_hsl(hex_color).h


def test_complementary_of_primaries():
    assert complementary("#ff0000") == "#00ffff"
    assert complementary("#0000ff") == "#ffff00"


def test_rotations_land_on_expected_hues():
    base = "#ff0000"
    assert [hue_of(c) for c in analogous(base)] == pytest.approx([330.0, 30.0], abs=1.0)
    assert [hue_of(c) for c in triadic(base)] == pytest.approx([240.0, 120.0], abs=1.0)
    assert [hue_of(c) for c in quadratic(base)] == pytest.approx([270.0, 180.0, 90.0], abs=1.0)


def test_split_complementary_is_analogous_of_complement():
    assert split_complementary("#3b82f6") == analogous(complementary("#3b82f6"))


def test_tetradic_combines_two_complements():
    assert tetradic("#ff0000", "#00ff00") == [complementary("#ff0000"), complementary("#00ff00")]


def test_monochromatic_spacing():
    colors = monochromatic("#3b82f6", 4)
    assert len(colors) == 4
    ls = [hex_to_hsl(c).l for c in colors]
    assert np.allclose(ls, [20, 40, 60, 80], atol=0.5)
    assert monochromatic("#3b82f6", 0) == []
    with pytest.raises(ValueError):
        monochromatic("#3b82f6", -1)


def test_harmonies_validate_input():
    with pytest.raises(InvalidFormat):
        analogous("blue")


def test_config_is_hashable_and_read_only():
    assert hash(PaletteConfig()) == hash(PaletteConfig())
    assert {PaletteConfig(): "default"}[PaletteConfig()] == "default"
    with pytest.raises(TypeError):
        PaletteConfig().fit["method"] = "clip"


def test_config_fit_is_passed_through():
    clip = PaletteConfig(fit={"method": "clip"})
    assert clip.fit == {"method": "clip"}
    assert len(tailwind_palette("#3b82f6", clip)) == 11
