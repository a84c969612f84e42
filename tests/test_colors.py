import pytest

from sheepfold.colors import lookup_color, text_to_rgb


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("ghostwhite", 0xF8F8FF),
        ("navy", 0x80),
        ("black", 0x0),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_lookup_unknown_returns_none():
    assert lookup_color("not a colour") is None


def test_duplicate_name_first_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")
        assert lookup_color(f"gray{level}") is not None


def test_none_is_transparent():
    assert text_to_rgb("none", None) == -1
    assert text_to_rgb("None", None) == -1


def test_hex_spec_is_parsed():
    assert text_to_rgb("#ff00ff", None) == 0xFF00FF
    assert text_to_rgb("#FFFFFF", "ignored") == 0xFFFFFF


def test_hex_spec_stops_at_invalid_digit():
    assert text_to_rgb("#12zz", None) == 0x12


def test_hex_spec_without_digits_is_zero():
    assert text_to_rgb("#", None) == 0
    assert text_to_rgb("#xyz", None) == 0


def test_two_word_name_is_joined():
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")
    assert text_to_rgb("ghost", "white") == 0xF8F8FF


def test_single_word_name_matches_lookup():
    for name in ("red", "bisque", "thistle4", "darkred"):
        assert text_to_rgb(name, None) == lookup_color(name)


def test_unknown_name_resolves_to_zero():
    assert text_to_rgb("nosuchcolour", None) == 0
    assert text_to_rgb("nosuch", "colour") == 0


def test_overlong_joined_name_is_truncated_and_not_found():
    assert text_to_rgb("red", "x" * 100) == 0