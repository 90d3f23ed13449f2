import pytest

from solong.colors import COLORS, NO_COLOR, lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == NO_COLOR
    assert lookup_color("NONE") == -1


@pytest.mark.parametrize("name", ["White", "WHITE", "wHiTe"])
def test_case_insensitive(name):
    assert lookup_color(name) == lookup_color("white")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["not a colour", "", "whitee", " white"])
def test_unknown_names(name):
    assert lookup_color(name) is None


def test_non_ascii_name_is_unknown():
    assert lookup_color("wh\u0130te") is None


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_scale_is_non_decreasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    ("spaced", "joined"),
    [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("deep pink", "deeppink"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


def test_numbered_variant_one_matches_base_for_snow():
    assert lookup_color("snow1") == lookup_color("snow")


def test_all_colours_fit_in_rgb_or_are_transparent():
    for name, value in COLORS.items():
        assert value == NO_COLOR or 0 <= value <= 0xFFFFFF, name
        assert lookup_color(name) == value


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLORS["white"] = 0  # type: ignore[index]
    assert lookup_color("white") == 0xFFFFFF