import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *tile[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1 ",
"a c #112233",
"b c None",
"ab",
"ba"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  2 \t3\t\t4 1 ") == ["2", "3", "4", "1"]


def test_split_words_keeps_other_characters():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length():
    text = "/* a */ x // b\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "a" not in result and "b" not in result
    assert result.strip().split() == ["x", "y"]


def test_strip_comments_ignores_quoted_markers():
    text = '"a//b" "c/*d*/" // tail\n'
    result = strip_comments(text)
    assert result.startswith('"a//b" "c/*d*/" ')
    assert "tail" not in result


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00") == 0x00FF00


def test_text_to_rgb_named_case_insensitive():
    assert text_to_rgb("RED") == 0xFF0000


def test_text_to_rgb_two_words():
    assert text_to_rgb("ghost", "white") == 0xF8F8FF


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == ((0x112233, TRANSPARENT), (TRANSPARENT, 0x112233))
    assert image.pixel(1, 0) == TRANSPARENT


def test_parse_lines_matches_text():
    lines = ["2 2 2 1", "a c #112233", "b c None", "ab", "ba"]
    assert parse_xpm_lines(lines) == parse_xpm_text(SAMPLE)


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.pixel(0, 0) == 0x000001


def test_unknown_key_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c #123456", "z"])
    assert image.pixel(0, 0) == 0


def test_to_rgba():
    image = XpmImage(width=2, height=1, pixels=((0x112233, TRANSPARENT),))
    assert image.to_rgba() == b"\x11\x22\x33\xff\x00\x00\x00\x00"


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c red", "aa", "aa"],
        ["1 1 1 1", "a s key", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 1 1 1", "a c red", "a"],
        ["1 2 1 1", "a c red", "a"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")