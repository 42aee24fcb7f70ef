import pytest

from solong.colors import (
    COLOR_TABLE,
    color_from_text,
    good_color,
    lookup_color,
    mask_shifts,
)

RGB565 = (0xF800, 0x07E0, 0x001F)
RGB888 = (0xFF0000, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghostwhite", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("grey1", 0x030303),
        ("gray100", 0xFFFFFF),
        ("snow4", 0x8B8989),
        ("thistle3", 0xCDB5CD),
        ("lightgreen", 0x90EE90),
        ("none", -1),
    ],
)
def test_lookup_color_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_color_ignores_case():
    assert lookup_color("DarkOrchid") == 0x9932CC
    assert lookup_color("LIGHT GRAY") == 0xD3D3D3


def test_lookup_color_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_color_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_every_table_name_resolves_within_rgb():
    for name, _ in COLOR_TABLE:
        value = lookup_color(name)
        assert -1 <= value <= 0xFFFFFF
        assert lookup_color(name.upper()) == value
    assert lookup_color(COLOR_TABLE[-1][0]) == -1


def test_color_from_text_hex():
    assert color_from_text("#FF00FF") == 0xFF00FF
    assert color_from_text("#0a0b0c", None) == 0x0A0B0C


def test_color_from_text_hex_stops_at_invalid_digit():
    assert color_from_text("#12zz") == 0x12
    assert color_from_text("#zz") == 0


def test_color_from_text_hex_ignores_end():
    assert color_from_text("#000080", "blue") == 0x80


def test_color_from_text_joins_two_words():
    assert color_from_text("dark", "slate") == 0x2F4F4F
    assert color_from_text("Medium", "Purple") == 0x9370DB


def test_color_from_text_single_name():
    assert color_from_text("Red") == 0xFF0000
    assert color_from_text("None") == -1


def test_color_from_text_unknown_gives_zero():
    assert color_from_text("nosuchcolour") == 0
    assert color_from_text("red", "blue") == 0


def test_mask_shifts_rgb565():
    assert mask_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


def test_mask_shifts_rgb888():
    assert mask_shifts(*RGB888) == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        mask_shifts(0, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x0, 0x123456])
def test_good_color_deep_visual_is_identity(color):
    assert good_color(color, 24, mask_shifts(*RGB888)) == color
    assert good_color(color, 32, mask_shifts(*RGB888)) == color


@pytest.mark.parametrize(
    "color, expected",
    [
        (0xFFFFFF, 0xFFFF),
        (0xFF0000, 0xF800),
        (0x00FF00, 0x07E0),
        (0x0000FF, 0x001F),
        (0x00FFFF, 0x07FF),
        (0x000000, 0x0000),
    ],
)
def test_good_color_rgb565(color, expected):
    assert good_color(color, 16, mask_shifts(*RGB565)) == expected


def test_good_color_gradient_stays_within_16_bits():
    # Colour ramp built like the library's own demo window fill.
    w = h = 42
    shifts = mask_shifts(*RGB565)
    for x in range(w):
        for y in range(h):
            color = (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
            assert 0 <= good_color(color, 16, shifts) <= 0xFFFF


def test_good_color_rejects_bad_shifts():
    with pytest.raises(ValueError):
        good_color(0xFFFFFF, 16, (11, 5))