import pytest

from wolfmaze.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_value,
    parse_xpm,
    quoted_lines,
    read_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c light blue",
/* pixels */
" .X",
"X. ",
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  12  34\t5 ") == ["12", "34", "5"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_block_comment_keeps_length():
    text = "x /* y */ z"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "y" not in result
    assert result.startswith("x ") and result.endswith(" z")


def test_strip_line_comment_including_newline():
    assert strip_comments("a // c\nb") == "a" + " " * 6 + "b"


def test_comments_inside_quotes_survive():
    text = '"a /* b */ c" // gone\n'
    result = strip_comments(text)
    assert result.startswith('"a /* b */ c"')
    assert "gone" not in result


def test_quoted_lines_ignores_unterminated():
    assert quoted_lines('x "one", "two" , "three') == ["one", "two"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff7f", None) == 0x00FF7F


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_none_is_transparent_marker():
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_name_is_black():
    assert text_to_rgb("nosuchcolour", None) == 0
    assert text_to_rgb("#zz", None) == 0


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x123456])
def test_color_value_true_colour_is_unchanged(color):
    assert color_value(color, 24, 0xFF0000, 0x00FF00, 0x0000FF) == color


@pytest.mark.parametrize(
    ("color", "expected"),
    [(0xFF0000, 0xF800), (0x00FF00, 0x07E0), (0x0000FF, 0x001F), (0xFFFFFF, 0xFFFF), (0, 0)],
)
def test_color_value_packs_into_565(color, expected):
    assert color_value(color, 16, 0xF800, 0x07E0, 0x001F) == expected


def test_color_value_rejects_empty_mask():
    with pytest.raises(ValueError):
        color_value(0x123456, 16, 0, 0x07E0, 0x001F)


def test_parse_sample():
    image = parse_xpm(quoted_lines(strip_comments(SAMPLE)))
    assert (image.width, image.height) == (3, 2)
    assert image.pixels == (
        (TRANSPARENT, 0xFF0000, 0xADD8E6),
        (0xADD8E6, 0xFF0000, TRANSPARENT),
    )
    assert image.pixel(1, 0) == 0xFF0000


def test_pixel_out_of_range():
    image = XpmImage(1, 1, ((0,),))
    with pytest.raises(IndexError):
        image.pixel(1, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_unknown_pixel_key_is_zero():
    image = parse_xpm(["2 1 1 1", "a c #FFFFFF", "ab"])
    assert image.pixels == ((0xFFFFFF, 0),)


def test_two_char_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 2", "ab c #000001", "ab c #000002", "ab"])
    assert image.pixel(0, 0) == 0x000002


def test_three_char_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 0x000001


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #FFFFFF", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s sym"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c #FFFFFF", "a"],
        ["2 1 1 1", "a c #FFFFFF", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_read_xpm_from_file(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    image = read_xpm(path)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(2, 0) == 0xADD8E6


def test_read_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm(tmp_path / "absent.xpm")