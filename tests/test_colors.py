import pytest

from wolfmaze.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("green", 0xFF00),
        ("blue", 0xFF),
        ("gray50", 0x7F7F7F),
        ("light green", 0x90EE90),
    ],
)
def test_known_names(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    for spaced, joined in [
        ("ghost white", "ghostwhite"),
        ("midnight blue", "midnightblue"),
        ("navy blue", "navyblue"),
        ("hot pink", "hotpink"),
        ("dark red", "darkred"),
    ]:
        assert lookup_color(spaced) == lookup_color(joined)


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_numbered_first_matches_base():
    for base in ["snow", "bisque", "ivory", "azure", "yellow", "red", "magenta"]:
        assert lookup_color(f"{base}1") == lookup_color(base)


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")
    with pytest.raises(KeyError):
        lookup_color("")