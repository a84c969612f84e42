import pytest

from sheepfold.xpm import (
    TRANSPARENT,
    XpmError,
    color_key,
    extract_strings,
    find_unquoted,
    parse_xpm,
    str_to_wordtab,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    "r c #FF0000",
    "g c green",
    ". c None",
    "rg.",
    ".gr",
]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"r c #FF0000",
"g c green",
". c None",
// pixels
"rg.",
".gr"
};
"""


def test_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  42 \t 7\tc  red ") == ["42", "7", "c", "red"]
    assert str_to_wordtab(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    assert find_unquoted('"/*" /*', "/*") == 5
    assert find_unquoted('"a /* b"', "/*") == -1
    assert find_unquoted("ab", "abc") == -1


def test_find_unquoted_rejects_empty():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_strip_comments_keeps_length_and_strings():
    text = 'x /* note */ "keep /* this */" y // tail\nz'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "note" not in stripped
    assert "tail" not in stripped
    assert '"keep /* this */"' in stripped
    assert stripped.endswith("z")


def test_color_key_packs_characters():
    assert color_key("a") == ord("a")
    assert color_key("ab") == 0x6162


def test_extract_strings():
    assert extract_strings('{ "one", "two" , x "three" "') == ["one", "two", "three"]


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x00FF00
    assert image.get_pixel(2, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(2, 1) == 0xFF0000


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE).data == parse_xpm(SAMPLE).data


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "x c navy blue", "x"])
    assert image.get_pixel(0, 0) == 0x80


def test_undefined_key_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c white", "ab"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


def test_short_keys_later_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == 0xFF


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (3, 2)
    assert image.data == parse_xpm(SAMPLE).data


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")