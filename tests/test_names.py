import pytest

from color_scales.codec import HslColor, InvalidFormat
from color_scales.names import (
    CSS_COLOR_NAMES,
    NameResolver,
    NamedColorEntry,
    closest_color_name,
    default_table,
    table_from_hex,
)


def test_default_table_keeps_source_order():
    table = default_table()
    assert len(table) == len(CSS_COLOR_NAMES)
    assert [e.name for e in table] == [name for name, _ in CSS_COLOR_NAMES]
    assert default_table() is table


@pytest.mark.parametrize(
    "hex_color, name",
    [
        ("#ff0000", "red"),
        ("#FF0000", "red"),
        ("000000", "black"),
        ("#ffffff", "white"),
        ("#663399", "rebeccapurple"),
        ("#fe0101", "red"),
    ],
)
def test_nearest_named_color(hex_color, name):
    assert closest_color_name(hex_color) == name


def test_exact_ties_go_to_first_entry():
    # aqua and cyan share a value, aqua comes first
    assert closest_color_name("#00ffff") == "aqua"
    table = [
        NamedColorEntry(HslColor(0, 100, 50), "first"),
        NamedColorEntry(HslColor(0, 100, 50), "second"),
    ]
    assert NameResolver(table).nearest("#ff0000") == "first"
    assert NameResolver(list(reversed(table))).nearest("#ff0000") == "second"


def test_hue_wraparound_decides_match():
    table = table_from_hex([("warm", "#ff0a00"), ("cool", "#00a0ff")])
    # hue ~357.6 is under 5 degrees from "warm" across the 0/360 seam
    assert NameResolver(table).nearest("#ff000a") == "warm"


def test_repeated_lookups_are_stable():
    resolver = NameResolver()
    assert {resolver.nearest("#3b82f6") for _ in range(5)} == {resolver.nearest("#3b82f6")}


def test_distances_cover_whole_table():
    resolver = NameResolver()
    d = resolver.distances("#ff0000")
    assert d.shape == (len(resolver.table),)
    assert d.min() == 0.0


def test_invalid_input_raises_before_lookup():
    with pytest.raises(InvalidFormat):
        closest_color_name("#ff00")


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        NameResolver([])
